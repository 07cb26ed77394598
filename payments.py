from abc import ABC, abstractmethod

from settings import format_amount


class Payment(ABC):
    """Pays an order total through one payment mechanism."""

    @abstractmethod
    def pay(self, amount: float):
        pass


class CashPayment(Payment):
    def pay(self, amount: float):
        print(f"Paying {format_amount(amount)} in cash.")


class CardPayment(Payment):
    def pay(self, amount: float):
        print(f"Paying {format_amount(amount)} by card.")


class ExternalPaymentAPI:
    """Third-party payment service with its own call shape (not a Payment)."""

    def do_transaction(self, amount: float):
        print(f"Payment completed through external API: {format_amount(amount)}")


class ExternalPaymentAdapter(Payment):
    def __init__(self, api: ExternalPaymentAPI):
        self.api = api

    def pay(self, amount: float):
        self.api.do_transaction(amount)

import logging
from abc import ABC, abstractmethod

from settings import format_amount

audit_log = logging.getLogger("pizzeria.audit")


class Observer(ABC):
    @abstractmethod
    def update(self, total: float):
        pass


class EmailNotifier(Observer):
    def update(self, total: float):
        print(f"[Email] Sending order confirmation for {format_amount(total)}...")


class AuditLogger(Observer):
    """Writes the order total to the ``pizzeria.audit`` logger at INFO.

    With PIZZA_LOG_LEVEL set above INFO the record is filtered out.
    """

    def update(self, total: float):
        audit_log.info("Order registered for %s.", format_amount(total))

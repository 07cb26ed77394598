import logging
from dataclasses import dataclass, field
from typing import Dict, List

from notifiers import Observer
from payments import Payment
from settings import format_amount

logger = logging.getLogger("pizzeria.order")


@dataclass(frozen=True)
class Pizza:
    name: str
    price: float
    kind: str = "menu"  # "menu" or "custom"

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")


PEPPERONI_PIZZA = Pizza(name="Pepperoni Pizza", price=40)
HAWAIIAN_PIZZA = Pizza(name="Hawaiian Pizza", price=50)

MENU_PIZZAS: List[Pizza] = [PEPPERONI_PIZZA, HAWAIIAN_PIZZA]
MENU_BY_OPTION: Dict[int, Pizza] = {i: pizza for i, pizza in enumerate(MENU_PIZZAS, 1)}


class PizzaBuilder:
    """Accumulates add-on costs for a custom pizza.

    ``build()`` does not reset the accumulated price, so building twice from
    the same builder yields a second pizza that includes the first one's
    add-ons. Call ``reset()`` (or use a new builder) to start over.
    """

    CHEESE_PRICE = 10
    PEPPERONI_PRICE = 12
    PINEAPPLE_PRICE = 8

    def __init__(self):
        self.name = "Custom Pizza"
        self.price = 0.0

    def add_cheese(self) -> "PizzaBuilder":
        self.price += self.CHEESE_PRICE
        return self

    def add_pepperoni(self) -> "PizzaBuilder":
        self.price += self.PEPPERONI_PRICE
        return self

    def add_pineapple(self) -> "PizzaBuilder":
        self.price += self.PINEAPPLE_PRICE
        return self

    def reset(self) -> "PizzaBuilder":
        self.price = 0.0
        return self

    def build(self) -> Pizza:
        return Pizza(name=self.name, price=self.price, kind="custom")


@dataclass
class Order:
    items: List[Pizza] = field(default_factory=list)
    observers: List[Observer] = field(default_factory=list)

    def add_item(self, item: Pizza):
        self.items.append(item)

    def add_observer(self, observer: Observer):
        self.observers.append(observer)

    def remove_observer(self, observer: Observer):
        self.observers.remove(observer)

    def notify_observers(self, total: float):
        for observer in self.observers:
            observer.update(total)

    def calculate_total(self) -> float:
        return sum(item.price for item in self.items)

    def checkout(self, payment: Payment) -> float:
        """Notify every observer of the current total, then pay it.

        The total is recomputed on each call; an empty order still goes
        through with a total of 0.
        """
        total = self.calculate_total()
        logger.debug("checkout of %d item(s), total=%s", len(self.items), total)
        self.notify_observers(total)
        print(f"Total to pay: {format_amount(total)}")
        payment.pay(total)
        return total

    def list_order(self) -> str:
        lines = ["Pizzas in the order:"]
        for it in self.items:
            lines.append(f"- {it.name} ({format_amount(it.price)})")
        return "\n".join(lines)

    def clear_order(self):
        # observers are borrowed, only the items belong to the order
        self.items.clear()

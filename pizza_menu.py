import logging
from typing import Optional

import settings
from notifiers import AuditLogger, EmailNotifier
from order_state import MENU_BY_OPTION, Order, PizzaBuilder
from payments import CardPayment, CashPayment, ExternalPaymentAPI, ExternalPaymentAdapter, Payment
from settings import format_amount

# Global order object
current_order = Order()

CUSTOM_OPTION = 3
FINISH_OPTION = 4
DONE_INGREDIENT = 0

INGREDIENTS = {
    1: ("Cheese", PizzaBuilder.CHEESE_PRICE, PizzaBuilder.add_cheese),
    2: ("Pepperoni", PizzaBuilder.PEPPERONI_PRICE, PizzaBuilder.add_pepperoni),
    3: ("Pineapple", PizzaBuilder.PINEAPPLE_PRICE, PizzaBuilder.add_pineapple),
}


def parse_option(raw: str) -> Optional[int]:
    """Return the integer typed by the user, or None if it isn't one."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def main_menu() -> str:
    lines = ["", "=== Pizza Menu ==="]
    for option, pizza in MENU_BY_OPTION.items():
        lines.append(f"{option}. {pizza.name} ({format_amount(pizza.price)})")
    lines.append(f"{CUSTOM_OPTION}. Custom Pizza")
    lines.append(f"{FINISH_OPTION}. Finish order")
    return "\n".join(lines)


def ingredient_menu() -> str:
    lines = ["Choose the ingredients for your custom pizza:"]
    for option, (name, price, _) in INGREDIENTS.items():
        lines.append(f"{option}. {name} (+{format_amount(price)})")
    lines.append(f"{DONE_INGREDIENT}. Done")
    return "\n".join(lines)


def build_custom_pizza(order: Order):
    builder = PizzaBuilder()
    print(ingredient_menu())
    while True:
        choice = parse_option(input("Ingredient: "))
        if choice == DONE_INGREDIENT:
            break
        if choice in INGREDIENTS:
            INGREDIENTS[choice][2](builder)
        else:
            print("Invalid option.")
    order.add_item(builder.build())


def handle_menu_option(order: Order, option: Optional[int]) -> bool:
    """Apply one main-menu selection. Returns False once the order is finished."""
    if option in MENU_BY_OPTION:
        order.add_item(MENU_BY_OPTION[option])
    elif option == CUSTOM_OPTION:
        build_custom_pizza(order)
    elif option == FINISH_OPTION:
        print("Finishing order...")
        return False
    else:
        print("Invalid option.")
    return True


def select_payment(option: Optional[int]) -> Payment:
    if option == 1:
        return CashPayment()
    if option == 2:
        return CardPayment()
    if option == 3:
        return ExternalPaymentAdapter(ExternalPaymentAPI())
    print("Invalid payment method. Cash will be used by default.")
    return CashPayment()


def order_loop(order: Order):
    running = True
    while running:
        print(main_menu())
        running = handle_menu_option(order, parse_option(input("Select an option: ")))

    print(order.list_order())

    print("\nSelect a payment method:")
    print("1. Cash")
    print("2. Card")
    print("3. External API (Adapter)")
    payment = select_payment(parse_option(input()))

    order.checkout(payment)
    order.clear_order()


def main():
    logging.basicConfig(level=settings.LOG_LEVEL, format="[%(name)s] %(message)s")
    current_order.add_observer(EmailNotifier())
    current_order.add_observer(AuditLogger())
    order_loop(current_order)


if __name__ == "__main__":
    main()

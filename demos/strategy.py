"""Strategy scenarios: if/elif checkout vs swappable payment strategies."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive import strategy as naive
from patterns.domain_config import DemoConfig
from patterns.strategy import CreditCardPayment, ShoppingCart, UpiPayment

_ROLES = [
    "Strategy: PaymentStrategy",
    "Concrete Strategies: CreditCardPayment, DebitCardPayment, PaypalPayment, "
    "UpiPayment, NetBankingPayment, WalletPayment",
    "Context: ShoppingCart",
]


@register_demo(
    "strategy", "without",
    title="Checkout branches on the method",
    summary="Every payment method is another branch inside ShoppingCart.checkout().",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("Scenario 1: Customer pays with Credit Card")
    narrate("-------------------------------------------")
    cart = naive.ShoppingCart(config.customer_name)
    cart.add_item_price(50)
    cart.add_item_price(25)
    cart.add_item_price(25)
    cart.checkout("credit_card")

    narrate("")
    narrate("Scenario 2: Same customer pays with UPI next time")
    narrate("-------------------------------------------")
    cart2 = naive.ShoppingCart(config.customer_name)
    cart2.add_item_price(100)
    cart2.add_item_price(150)
    cart2.checkout("upi")


@register_demo(
    "strategy", "with",
    title="Swappable payment strategies",
    summary="The cart delegates to a PaymentStrategy that can be replaced at runtime.",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("========== STRATEGY PATTERN ==========")
    cart = ShoppingCart(config.customer_name)
    cart.add_item_price(50)
    cart.add_item_price(25)
    cart.add_item_price(25)
    cart.set_payment_strategy(CreditCardPayment())
    cart.checkout()

    narrate("")
    narrate("--- Switching strategy at runtime ---")
    narrate("")
    cart2 = ShoppingCart(config.customer_name)
    cart2.add_item_price(100)
    cart2.add_item_price(150)
    cart2.set_payment_strategy(UpiPayment())
    cart2.checkout()

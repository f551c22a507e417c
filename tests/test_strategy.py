"""Test payment strategies and the shopping cart."""
from decimal import Decimal

import pytest
from core.narration import capture_narration
from naive import strategy as naive
from patterns.strategy import (
    CreditCardPayment,
    ShoppingCart,
    UpiPayment,
    WalletPayment,
    payment_methods,
    strategy_for,
)


def test_cart_total():
    cart = ShoppingCart("John Doe")
    cart.add_item_price(50)
    cart.add_item_price(25)
    cart.add_item_price("25.50")
    assert cart.total == Decimal("100.50")


def test_checkout_requires_strategy():
    cart = ShoppingCart("John Doe")
    cart.add_item_price(10)
    with pytest.raises(RuntimeError, match="Payment strategy not set"):
        cart.checkout()


def test_checkout_delegates_to_strategy():
    cart = ShoppingCart("John Doe")
    cart.add_item_price(100)
    cart.set_payment_strategy(CreditCardPayment())
    with capture_narration() as transcript:
        result = cart.checkout()
    assert result.method == "Credit Card"
    assert result.amount == Decimal("100")
    assert transcript.lines[0] == "Processing Credit Card Payment..."
    assert "✓ Paid $100.00 using Credit Card" in transcript.lines
    assert transcript.lines[-1] == "Receipt: Credit Card ending in ****-****-****-3456"


def test_strategy_switch_at_runtime():
    cart = ShoppingCart("John Doe")
    cart.add_item_price(250)
    cart.set_payment_strategy(CreditCardPayment())
    cart.set_payment_strategy(UpiPayment())
    with capture_narration():
        result = cart.checkout()
    assert result.method == "UPI"
    assert result.receipt == "UPI ID 9988776655@ybl"


def test_steps_are_numbered():
    with capture_narration() as transcript:
        WalletPayment().pay(Decimal("20"))
    steps = [line for line in transcript.lines if line.startswith("Step")]
    assert steps[0] == "Step 1: Check wallet balance"
    assert steps[-1] == "Step 5: Send notification to customer"


def test_strategy_for():
    assert isinstance(strategy_for("upi"), UpiPayment)
    assert len(payment_methods()) == 6
    with pytest.raises(ValueError, match="Unknown payment method"):
        strategy_for("cheque")


@pytest.mark.parametrize("method", payment_methods())
def test_naive_and_strategy_narrate_the_same(method):
    naive_cart = naive.ShoppingCart("John Doe")
    cart = ShoppingCart("John Doe")
    for price in (100, 150):
        naive_cart.add_item_price(price)
        cart.add_item_price(price)
    cart.set_payment_strategy(strategy_for(method))

    with capture_narration() as before:
        naive_cart.checkout(method)
    with capture_narration() as after:
        cart.checkout()
    assert before.lines == after.lines


def test_naive_unknown_method():
    cart = naive.ShoppingCart("John Doe")
    with pytest.raises(ValueError, match="Unknown payment method: cheque"):
        cart.checkout("cheque")

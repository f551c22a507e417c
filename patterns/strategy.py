"""Strategy pattern: interchangeable payment methods at checkout.

The shopping cart holds a PaymentStrategy and delegates checkout to it.
Each payment method is its own class, so adding one never edits the cart,
and a customer can switch method at runtime.

Example domain: an online store accepting cards, PayPal, UPI, net banking
and wallets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.narration import fmt_money, narrate


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a single payment."""

    method: str
    amount: Decimal
    receipt: str


# ---------------------------------------------------------------------------
# Strategy interface
# ---------------------------------------------------------------------------

class PaymentStrategy(ABC):
    """Pays an amount. Subclasses describe their own processing steps."""

    #: Human-readable method name used in narration
    display_name: str = ""

    @abstractmethod
    def steps(self) -> list[str]:
        ...

    @abstractmethod
    def receipt(self) -> str:
        ...

    def pay(self, amount: Decimal) -> PaymentResult:
        narrate(f"Processing {self.display_name} Payment...")
        for number, step in enumerate(self.steps(), start=1):
            narrate(f"Step {number}: {step}")
        narrate(f"✓ Paid {fmt_money(amount)} using {self.display_name}")
        receipt = self.receipt()
        narrate(f"Receipt: {receipt}")
        return PaymentResult(method=self.display_name, amount=amount, receipt=receipt)


# ---------------------------------------------------------------------------
# Concrete strategies
# ---------------------------------------------------------------------------

class CreditCardPayment(PaymentStrategy):
    display_name = "Credit Card"

    def __init__(self, last_four: str = "3456"):
        self.last_four = last_four

    def steps(self) -> list[str]:
        return [
            "Validate card number",
            "Check with fraud detection system",
            "Charge the card",
            "Wait for response from bank",
            "Save transaction to database",
        ]

    def receipt(self) -> str:
        return f"Credit Card ending in ****-****-****-{self.last_four}"


class DebitCardPayment(PaymentStrategy):
    display_name = "Debit Card"

    def __init__(self, last_four: str = "7890"):
        self.last_four = last_four

    def steps(self) -> list[str]:
        return [
            "Validate debit card",
            "Check account balance",
            "Charge the card",
            "Send confirmation SMS",
        ]

    def receipt(self) -> str:
        return f"Debit Card ending in ****-****-****-{self.last_four}"


class PaypalPayment(PaymentStrategy):
    display_name = "PayPal"

    def __init__(self, account: str = "john@example.com"):
        self.account = account

    def steps(self) -> list[str]:
        return [
            "Redirect to PayPal login page",
            "User authenticates on PayPal server",
            "User confirms payment amount",
            "PayPal sends callback with transaction ID",
            "Verify callback signature",
            "Save transaction to database",
        ]

    def receipt(self) -> str:
        return f"PayPal Account {self.account}"


class UpiPayment(PaymentStrategy):
    display_name = "UPI"

    def __init__(self, upi_id: str = "9988776655@ybl"):
        self.upi_id = upi_id

    def steps(self) -> list[str]:
        return [
            "Validate UPI ID format",
            "Generate transaction ID and QR code",
            "Send OTP to mobile",
            "User enters OTP in UPI app",
            "NPCI processes the transaction",
            "Receive confirmation from bank",
        ]

    def receipt(self) -> str:
        return f"UPI ID {self.upi_id}"


class NetBankingPayment(PaymentStrategy):
    display_name = "Net Banking"

    def __init__(self, bank: str = "HDFC Bank"):
        self.bank = bank

    def steps(self) -> list[str]:
        return [
            "Identify which bank customer is using",
            "Redirect to bank's net banking portal",
            "Customer logs in with bank credentials",
            "Customer confirms the amount and beneficiary",
            "Bank processes the fund transfer",
            "Bank sends confirmation back",
        ]

    def receipt(self) -> str:
        return f"{self.bank} Transfer"


class WalletPayment(PaymentStrategy):
    display_name = "Wallet"

    def __init__(self, remaining_balance: Decimal = Decimal("500")):
        self.remaining_balance = remaining_balance

    def steps(self) -> list[str]:
        return [
            "Check wallet balance",
            "Verify wallet is not frozen",
            "Deduct amount from wallet",
            "Add transaction to wallet history",
            "Send notification to customer",
        ]

    def receipt(self) -> str:
        return f"Wallet Balance Remaining: {fmt_money(self.remaining_balance)}"


_STRATEGIES: dict[str, type[PaymentStrategy]] = {
    "credit_card": CreditCardPayment,
    "debit_card": DebitCardPayment,
    "paypal": PaypalPayment,
    "upi": UpiPayment,
    "net_banking": NetBankingPayment,
    "wallet": WalletPayment,
}


def payment_methods() -> list[str]:
    return list(_STRATEGIES)


def strategy_for(method: str) -> PaymentStrategy:
    """Resolve a method key such as ``"upi"``. Raises ValueError if unknown."""
    strategy_cls = _STRATEGIES.get(method.lower())
    if strategy_cls is None:
        raise ValueError(f"Unknown payment method: {method}")
    return strategy_cls()


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

class ShoppingCart:
    """Cart that delegates payment to the current strategy.

    Usage::

        cart = ShoppingCart("John Doe")
        cart.add_item_price(50)
        cart.set_payment_strategy(UpiPayment())
        cart.checkout()
    """

    def __init__(self, customer_name: str):
        self.customer_name = customer_name
        self._total = Decimal("0")
        self._strategy: Optional[PaymentStrategy] = None

    def add_item_price(self, price: Decimal | int | str) -> None:
        self._total += Decimal(str(price))

    @property
    def total(self) -> Decimal:
        return self._total

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def checkout(self) -> PaymentResult:
        """Pay the total. Raises RuntimeError if no strategy was set."""
        if self._strategy is None:
            raise RuntimeError("Payment strategy not set!")
        return self._strategy.pay(self._total)

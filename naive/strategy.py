"""Without strategy: one checkout method branching on the payment method.

Every new payment method means editing checkout(), and every method's
logic lives in the same function.
"""

from __future__ import annotations

from decimal import Decimal

from core.narration import fmt_money, narrate


class ShoppingCart:
    def __init__(self, customer_name: str):
        self.customer_name = customer_name
        self.total_amount = Decimal("0")

    def add_item_price(self, price: Decimal | int | str) -> None:
        self.total_amount += Decimal(str(price))

    def checkout(self, payment_method: str) -> None:
        total = fmt_money(self.total_amount)

        if payment_method == "credit_card":
            narrate("Processing Credit Card Payment...")
            narrate("Step 1: Validate card number")
            narrate("Step 2: Check with fraud detection system")
            narrate("Step 3: Charge the card")
            narrate("Step 4: Wait for response from bank")
            narrate("Step 5: Save transaction to database")
            narrate(f"✓ Paid {total} using Credit Card")
            narrate("Receipt: Credit Card ending in ****-****-****-3456")

        elif payment_method == "debit_card":
            narrate("Processing Debit Card Payment...")
            narrate("Step 1: Validate debit card")
            narrate("Step 2: Check account balance")
            narrate("Step 3: Charge the card")
            narrate("Step 4: Send confirmation SMS")
            narrate(f"✓ Paid {total} using Debit Card")
            narrate("Receipt: Debit Card ending in ****-****-****-7890")

        elif payment_method == "paypal":
            narrate("Processing PayPal Payment...")
            narrate("Step 1: Redirect to PayPal login page")
            narrate("Step 2: User authenticates on PayPal server")
            narrate("Step 3: User confirms payment amount")
            narrate("Step 4: PayPal sends callback with transaction ID")
            narrate("Step 5: Verify callback signature")
            narrate("Step 6: Save transaction to database")
            narrate(f"✓ Paid {total} using PayPal")
            narrate("Receipt: PayPal Account john@example.com")

        elif payment_method == "upi":
            narrate("Processing UPI Payment...")
            narrate("Step 1: Validate UPI ID format")
            narrate("Step 2: Generate transaction ID and QR code")
            narrate("Step 3: Send OTP to mobile")
            narrate("Step 4: User enters OTP in UPI app")
            narrate("Step 5: NPCI processes the transaction")
            narrate("Step 6: Receive confirmation from bank")
            narrate(f"✓ Paid {total} using UPI")
            narrate("Receipt: UPI ID 9988776655@ybl")

        elif payment_method == "net_banking":
            narrate("Processing Net Banking Payment...")
            narrate("Step 1: Identify which bank customer is using")
            narrate("Step 2: Redirect to bank's net banking portal")
            narrate("Step 3: Customer logs in with bank credentials")
            narrate("Step 4: Customer confirms the amount and beneficiary")
            narrate("Step 5: Bank processes the fund transfer")
            narrate("Step 6: Bank sends confirmation back")
            narrate(f"✓ Paid {total} using Net Banking")
            narrate("Receipt: HDFC Bank Transfer")

        elif payment_method == "wallet":
            narrate("Processing Wallet Payment...")
            narrate("Step 1: Check wallet balance")
            narrate("Step 2: Verify wallet is not frozen")
            narrate("Step 3: Deduct amount from wallet")
            narrate("Step 4: Add transaction to wallet history")
            narrate("Step 5: Send notification to customer")
            narrate(f"✓ Paid {total} using Wallet")
            narrate("Receipt: Wallet Balance Remaining: $500.00")

        else:
            raise ValueError(f"Unknown payment method: {payment_method}")

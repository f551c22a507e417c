"""Without state pattern: an enum plus if/elif chains in every action.

Each action re-checks the current state, so one state's behaviour is spread
over four methods and a new state means editing all of them.
"""

from __future__ import annotations

from enum import Enum

from core.narration import narrate


class VendingState(str, Enum):
    """Vending machine states."""

    IDLE = "IDLE"
    HAS_MONEY = "HAS_MONEY"
    DISPENSING = "DISPENSING"
    OUT_OF_STOCK = "OUT_OF_STOCK"


class VendingMachine:
    def __init__(self, item_count: int):
        self.item_count = item_count
        self.money_inserted = 0
        self.current_state = VendingState.IDLE if item_count > 0 else VendingState.OUT_OF_STOCK

    def insert_money(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError(f"Amount must be positive, got {amount}")

        if self.current_state == VendingState.IDLE:
            self.money_inserted += amount
            narrate(f"Money inserted: ${amount}")
            narrate(f"Total amount: ${self.money_inserted}")
            self.current_state = VendingState.HAS_MONEY
        elif self.current_state == VendingState.HAS_MONEY:
            self.money_inserted += amount
            narrate(f"Additional money inserted: ${amount}")
            narrate(f"Total amount: ${self.money_inserted}")
        elif self.current_state == VendingState.DISPENSING:
            narrate("Please wait, already dispensing product")
        elif self.current_state == VendingState.OUT_OF_STOCK:
            narrate("Machine is out of stock. Cannot accept money")

    def select_product(self, product_price: int) -> None:
        if self.current_state == VendingState.IDLE:
            narrate("Please insert money first")
        elif self.current_state == VendingState.HAS_MONEY:
            if self.money_inserted >= product_price:
                narrate(f"Product selected. Price: ${product_price}")
                self.current_state = VendingState.DISPENSING
                self._dispense_product(product_price)
            else:
                narrate(
                    f"Insufficient money. Please insert ${product_price - self.money_inserted} more"
                )
        elif self.current_state == VendingState.DISPENSING:
            narrate("Already dispensing. Please wait")
        elif self.current_state == VendingState.OUT_OF_STOCK:
            narrate("Out of stock")

    def _dispense_product(self, product_price: int) -> None:
        if self.current_state != VendingState.DISPENSING:
            narrate("Cannot dispense in current state")
            return

        if self.item_count > 0:
            self.item_count -= 1
            narrate("Product dispensed!")

            change = self.money_inserted - product_price
            if change > 0:
                narrate(f"Change returned: ${change}")

            self.money_inserted = 0

            if self.item_count == 0:
                self.current_state = VendingState.OUT_OF_STOCK
                narrate("Machine is now out of stock")
            else:
                self.current_state = VendingState.IDLE
                narrate(f"Thank you! Items remaining: {self.item_count}")

    def cancel_transaction(self) -> None:
        if self.current_state == VendingState.IDLE:
            narrate("No transaction to cancel")
        elif self.current_state == VendingState.HAS_MONEY:
            narrate(f"Transaction cancelled. Refunding ${self.money_inserted}")
            self.money_inserted = 0
            self.current_state = VendingState.IDLE
        elif self.current_state == VendingState.DISPENSING:
            narrate("Cannot cancel while dispensing")
        elif self.current_state == VendingState.OUT_OF_STOCK:
            narrate("Machine is out of stock")

    def get_current_state(self) -> str:
        return self.current_state.value

    def display_status(self) -> None:
        narrate("")
        narrate("--- Vending Machine Status ---")
        narrate(f"State: {self.get_current_state()}")
        narrate(f"Items remaining: {self.item_count}")
        narrate(f"Money inserted: ${self.money_inserted}")
        narrate("------------------------------")
        narrate("")

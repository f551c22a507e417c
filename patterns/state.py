"""State pattern: a vending machine whose behaviour lives in state objects.

Each state is a class implementing every action. The machine delegates to
its current state, and states decide the next state. Adding a state means
adding one class; no existing if/elif chain grows.

Transitions are recorded so the machine's lifecycle can be inspected::

    machine = VendingMachine(item_count=1)
    machine.insert_money(5)
    machine.select_product(3)
    [t.to_state for t in machine.history]
    # ["HAS_MONEY", "DISPENSING", "OUT_OF_STOCK"]
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.narration import narrate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transition record
# ---------------------------------------------------------------------------

@dataclass
class StateTransition:
    """Record of a single state change."""

    from_state: str
    to_state: str
    trigger: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


# ---------------------------------------------------------------------------
# State interface
# ---------------------------------------------------------------------------

class VendingMachineState(ABC):
    name: str = ""

    @abstractmethod
    def insert_money(self, machine: "VendingMachine", amount: int) -> None:
        ...

    @abstractmethod
    def select_product(self, machine: "VendingMachine", price: int) -> None:
        ...

    @abstractmethod
    def cancel(self, machine: "VendingMachine") -> None:
        ...

    def dispense(self, machine: "VendingMachine", price: int) -> None:
        narrate("Cannot dispense in current state")


# ---------------------------------------------------------------------------
# Concrete states
# ---------------------------------------------------------------------------

class IdleState(VendingMachineState):
    name = "IDLE"

    def insert_money(self, machine: "VendingMachine", amount: int) -> None:
        machine.money_inserted += amount
        narrate(f"Money inserted: ${amount}")
        narrate(f"Total amount: ${machine.money_inserted}")
        machine.set_state(HasMoneyState(), trigger="insert_money")

    def select_product(self, machine: "VendingMachine", price: int) -> None:
        narrate("Please insert money first")

    def cancel(self, machine: "VendingMachine") -> None:
        narrate("No transaction to cancel")


class HasMoneyState(VendingMachineState):
    name = "HAS_MONEY"

    def insert_money(self, machine: "VendingMachine", amount: int) -> None:
        machine.money_inserted += amount
        narrate(f"Additional money inserted: ${amount}")
        narrate(f"Total amount: ${machine.money_inserted}")

    def select_product(self, machine: "VendingMachine", price: int) -> None:
        if machine.money_inserted < price:
            narrate(f"Insufficient money. Please insert ${price - machine.money_inserted} more")
            return
        narrate(f"Product selected. Price: ${price}")
        machine.set_state(DispensingState(), trigger="select_product")
        machine.state.dispense(machine, price)

    def cancel(self, machine: "VendingMachine") -> None:
        narrate(f"Transaction cancelled. Refunding ${machine.money_inserted}")
        machine.money_inserted = 0
        machine.set_state(IdleState(), trigger="cancel")


class DispensingState(VendingMachineState):
    name = "DISPENSING"

    def insert_money(self, machine: "VendingMachine", amount: int) -> None:
        narrate("Please wait, already dispensing product")

    def select_product(self, machine: "VendingMachine", price: int) -> None:
        narrate("Already dispensing. Please wait")

    def cancel(self, machine: "VendingMachine") -> None:
        narrate("Cannot cancel while dispensing")

    def dispense(self, machine: "VendingMachine", price: int) -> None:
        if machine.item_count <= 0:
            return
        machine.item_count -= 1
        narrate("Product dispensed!")

        change = machine.money_inserted - price
        if change > 0:
            narrate(f"Change returned: ${change}")
        machine.money_inserted = 0

        if machine.item_count == 0:
            machine.set_state(OutOfStockState(), trigger="dispense")
            narrate("Machine is now out of stock")
        else:
            machine.set_state(IdleState(), trigger="dispense")
            narrate(f"Thank you! Items remaining: {machine.item_count}")


class OutOfStockState(VendingMachineState):
    name = "OUT_OF_STOCK"

    def insert_money(self, machine: "VendingMachine", amount: int) -> None:
        narrate("Machine is out of stock. Cannot accept money")

    def select_product(self, machine: "VendingMachine", price: int) -> None:
        narrate("Out of stock")

    def cancel(self, machine: "VendingMachine") -> None:
        narrate("Machine is out of stock")


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

class VendingMachine:
    """Delegates every action to its current state."""

    def __init__(self, item_count: int):
        self.item_count = item_count
        self.money_inserted = 0
        self.state: VendingMachineState = IdleState() if item_count > 0 else OutOfStockState()
        self.history: list[StateTransition] = []

    def set_state(self, state: VendingMachineState, trigger: str) -> StateTransition:
        record = StateTransition(from_state=self.state.name, to_state=state.name, trigger=trigger)
        self.history.append(record)
        logger.debug("Vending machine %s -> %s (%s)", record.from_state, record.to_state, trigger)
        self.state = state
        return record

    def insert_money(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError(f"Amount must be positive, got {amount}")
        self.state.insert_money(self, amount)

    def select_product(self, product_price: int) -> None:
        self.state.select_product(self, product_price)

    def cancel_transaction(self) -> None:
        self.state.cancel(self)

    def get_current_state(self) -> str:
        return self.state.name

    def display_status(self) -> None:
        narrate("")
        narrate("--- Vending Machine Status ---")
        narrate(f"State: {self.get_current_state()}")
        narrate(f"Items remaining: {self.item_count}")
        narrate(f"Money inserted: ${self.money_inserted}")
        narrate("------------------------------")
        narrate("")

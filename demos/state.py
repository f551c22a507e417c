"""State scenarios: the same vending-machine session on both machines."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive import state as naive
from patterns import state as pattern
from patterns.domain_config import DemoConfig

PRICE = 3

_ROLES = [
    "Context: VendingMachine",
    "State: VendingMachineState",
    "Concrete States: IdleState, HasMoneyState, DispensingState, OutOfStockState",
]


def play_session(machine, stock: int) -> None:
    """Drive a machine through a fixed customer session.

    Works with either implementation; both expose the same actions.
    """
    machine.display_status()

    narrate("> Select before paying")
    machine.select_product(PRICE)

    narrate("> Insert $2")
    machine.insert_money(2)

    narrate("> Select with too little money")
    machine.select_product(PRICE)

    narrate("> Insert $5 more")
    machine.insert_money(5)

    narrate("> Select product")
    machine.select_product(PRICE)

    narrate("> Insert $1 then cancel")
    machine.insert_money(1)
    machine.cancel_transaction()

    for _ in range(stock - 1):
        narrate("> Buy another")
        machine.insert_money(PRICE)
        machine.select_product(PRICE)

    narrate("> Try to pay an empty machine")
    machine.insert_money(PRICE)

    machine.display_status()


@register_demo(
    "state", "without",
    title="Enum state with if/elif chains",
    summary="Every action re-checks an enum; one state's behaviour is spread over four methods.",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("========== WITHOUT STATE PATTERN ==========")
    play_session(naive.VendingMachine(config.vending_stock), config.vending_stock)


@register_demo(
    "state", "with",
    title="State objects",
    summary="Each state is a class; the machine delegates and records every transition.",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("========== WITH STATE PATTERN ==========")
    machine = pattern.VendingMachine(config.vending_stock)
    play_session(machine, config.vending_stock)

    narrate("Transitions:")
    for transition in machine.history:
        narrate(f"  {transition.from_state} -> {transition.to_state} ({transition.trigger})")

"""Test vending machine with and without the state pattern."""
import pytest
from core.narration import capture_narration
from demos.state import play_session
from naive import state as naive
from patterns import state as pattern


def test_initial_state():
    assert pattern.VendingMachine(3).get_current_state() == "IDLE"
    assert pattern.VendingMachine(0).get_current_state() == "OUT_OF_STOCK"
    assert naive.VendingMachine(0).get_current_state() == "OUT_OF_STOCK"


def test_purchase_with_change():
    machine = pattern.VendingMachine(2)
    with capture_narration() as transcript:
        machine.insert_money(5)
        machine.select_product(3)
    assert "Change returned: $2" in transcript.lines
    assert "Thank you! Items remaining: 1" in transcript.lines
    assert machine.get_current_state() == "IDLE"
    assert machine.money_inserted == 0


def test_insufficient_money():
    machine = pattern.VendingMachine(1)
    with capture_narration() as transcript:
        machine.insert_money(1)
        machine.select_product(3)
    assert transcript.lines[-1] == "Insufficient money. Please insert $2 more"
    assert machine.get_current_state() == "HAS_MONEY"


def test_last_item_goes_out_of_stock():
    machine = pattern.VendingMachine(1)
    with capture_narration() as transcript:
        machine.insert_money(3)
        machine.select_product(3)
        machine.insert_money(3)
    assert machine.get_current_state() == "OUT_OF_STOCK"
    assert transcript.lines[-1] == "Machine is out of stock. Cannot accept money"
    assert [t.to_state for t in machine.history] == ["HAS_MONEY", "DISPENSING", "OUT_OF_STOCK"]


def test_cancel_refunds():
    machine = pattern.VendingMachine(1)
    with capture_narration() as transcript:
        machine.cancel_transaction()
        machine.insert_money(4)
        machine.cancel_transaction()
    assert transcript.lines[0] == "No transaction to cancel"
    assert transcript.lines[-1] == "Transaction cancelled. Refunding $4"
    assert machine.get_current_state() == "IDLE"
    assert machine.history[-1].trigger == "cancel"


def test_dispense_outside_dispensing_state():
    machine = pattern.VendingMachine(1)
    with capture_narration() as transcript:
        machine.state.dispense(machine, 3)
    assert transcript.lines == ["Cannot dispense in current state"]
    assert machine.item_count == 1


def test_non_positive_amount_rejected():
    with pytest.raises(ValueError):
        pattern.VendingMachine(1).insert_money(0)
    with pytest.raises(ValueError):
        naive.VendingMachine(1).insert_money(-1)


@pytest.mark.parametrize("stock", [0, 1, 2, 3])
def test_both_machines_narrate_the_same_session(stock):
    with capture_narration() as before:
        play_session(naive.VendingMachine(stock), stock)
    with capture_narration() as after:
        play_session(pattern.VendingMachine(stock), stock)
    assert before.lines == after.lines

"""Test drink decorators."""
from decimal import Decimal

from naive.decorator import FlagBasedDrink, WhiskeyWithIceAndCoke, WhiskeyWithIceAndCokeAndLime
from patterns.decorator import (
    CokeDecorator,
    IceDecorator,
    LimeDecorator,
    OrangeJuiceDecorator,
    Rum,
    SodaDecorator,
    Vodka,
    Whiskey,
)


def test_base_spirits():
    assert Whiskey().cost == Decimal("5.00")
    assert Vodka().cost == Decimal("5.00")
    assert Rum().cost == Decimal("4.50")


def test_decorators_accumulate():
    order = LimeDecorator(CokeDecorator(IceDecorator(Whiskey())))
    assert order.description == "Whiskey, Ice, Coke, Lime"
    assert order.cost == Decimal("6.50")


def test_wrapping_twice_accumulates_additively():
    once = CokeDecorator(Rum())
    twice = CokeDecorator(CokeDecorator(Rum()))
    assert twice.cost - once.cost == Decimal("1.00")
    assert twice.description == "Rum, Coke, Coke"


def test_extra_ice_is_free():
    drink = IceDecorator(IceDecorator(Whiskey()))
    assert drink.cost == Decimal("5.00")
    assert drink.description == "Whiskey, Ice, Ice"


def test_other_drinks():
    assert OrangeJuiceDecorator(IceDecorator(Vodka())).cost == Decimal("6.50")
    assert SodaDecorator(LimeDecorator(Vodka())).cost == Decimal("6.50")
    assert CokeDecorator(IceDecorator(Rum())).cost == Decimal("5.50")


def test_naive_versions_match_decorated():
    decorated = CokeDecorator(IceDecorator(Whiskey()))
    assert WhiskeyWithIceAndCoke().cost == decorated.cost
    assert WhiskeyWithIceAndCoke().description == decorated.description

    flags = FlagBasedDrink(ice=True, coke=True, lime=True)
    assert flags.cost == WhiskeyWithIceAndCokeAndLime().cost
    assert flags.description == WhiskeyWithIceAndCokeAndLime().description

"""Decorator scenarios: subclass explosion vs stacked mixer decorators."""

from __future__ import annotations

from core.narration import fmt_money, narrate
from core.registry import register_demo
from naive import decorator as naive
from patterns.decorator import (
    CokeDecorator,
    Drink,
    IceDecorator,
    LimeDecorator,
    OrangeJuiceDecorator,
    Rum,
    SodaDecorator,
    Vodka,
    Whiskey,
)
from patterns.domain_config import DemoConfig

_ROLES = [
    "Component: Drink",
    "Concrete Components: Whiskey, Vodka, Rum",
    "Decorator: DrinkDecorator",
    "Concrete Decorators: IceDecorator, CokeDecorator, LimeDecorator, SodaDecorator, "
    "OrangeJuiceDecorator",
]


def _line(drink) -> str:
    return f"{drink.description} = {fmt_money(drink.cost)}"


@register_demo(
    "decorator", "without",
    title="Subclasses and flags",
    summary="One subclass per mixer combination, or one class with a flag per mixer.",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("=== Problem 1: Subclass Explosion ===")
    narrate(_line(naive.WhiskeyWithIce()))
    narrate(_line(naive.WhiskeyWithIceAndCoke()))

    narrate("")
    narrate("=== Problem 2: Boolean Flags (OCP Violation) ===")
    narrate(_line(naive.FlagBasedDrink(ice=True, coke=True)))

    narrate("")
    narrate("=== Summary of Problems ===")
    narrate("1. Subclass approach: Class explosion (2^N classes for N mixers)")
    narrate("2. Boolean flags: Violates OCP, must modify class for every new feature")
    narrate("3. Both: Can't easily do 'extra ice' or conditional mixers")
    narrate("4. Both: Hard to add new base spirits with different prices")


@register_demo(
    "decorator", "with",
    title="Stacked mixer decorators",
    summary="Mixers wrap the drink one at a time; wrapping twice means a double portion.",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("===== Bar with Decorator Pattern =====")
    narrate("")

    order: Drink = Whiskey()
    narrate(f"Bartender pours: {_line(order)}")
    order = IceDecorator(order)
    narrate(f"Added ice: {_line(order)}")
    order = CokeDecorator(order)
    narrate(f"Added coke: {_line(order)}")
    order = LimeDecorator(order)
    narrate(f"Added lime: {_line(order)}")
    order = IceDecorator(order)
    narrate(f"Added more ice: {_line(order)}")

    narrate("")
    narrate("===== Other Drinks =====")
    narrate(f"Screwdriver: {_line(OrangeJuiceDecorator(IceDecorator(Vodka())))}")
    narrate(f"Rum & Coke: {_line(CokeDecorator(IceDecorator(Rum())))}")
    narrate(f"Vodka Soda: {_line(SodaDecorator(LimeDecorator(Vodka())))}")
    narrate(f"Whiskey (extra ice): {_line(IceDecorator(IceDecorator(Whiskey())))}")

"""Decorator pattern: composing drinks at a bar.

A drink is a base spirit wrapped in any number of mixer decorators. Each
decorator adds its own price and label on top of whatever it wraps, so
"extra ice" is just wrapping twice, and a new mixer is one new class.

Prices are Decimal so stacked surcharges add up exactly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------

class Drink(ABC):
    @property
    @abstractmethod
    def cost(self) -> Decimal:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...


# ---------------------------------------------------------------------------
# Concrete components
# ---------------------------------------------------------------------------

class Whiskey(Drink):
    @property
    def cost(self) -> Decimal:
        return Decimal("5.00")

    @property
    def description(self) -> str:
        return "Whiskey"


class Vodka(Drink):
    @property
    def cost(self) -> Decimal:
        return Decimal("5.00")

    @property
    def description(self) -> str:
        return "Vodka"


class Rum(Drink):
    @property
    def cost(self) -> Decimal:
        return Decimal("4.50")

    @property
    def description(self) -> str:
        return "Rum"


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------

class DrinkDecorator(Drink):
    """Wraps a drink and delegates to it.

    Subclasses set ``surcharge`` and ``label``; the wrapper adds both on
    top of the wrapped drink.
    """

    surcharge: Decimal = Decimal("0.00")
    label: str = ""

    def __init__(self, drink: Drink):
        self.drink = drink

    @property
    def cost(self) -> Decimal:
        return self.drink.cost + self.surcharge

    @property
    def description(self) -> str:
        if not self.label:
            return self.drink.description
        return f"{self.drink.description}, {self.label}"


class IceDecorator(DrinkDecorator):
    surcharge = Decimal("0.00")  # ice is free
    label = "Ice"


class CokeDecorator(DrinkDecorator):
    surcharge = Decimal("1.00")
    label = "Coke"


class LimeDecorator(DrinkDecorator):
    surcharge = Decimal("0.50")
    label = "Lime"


class SodaDecorator(DrinkDecorator):
    surcharge = Decimal("1.00")
    label = "Soda"


class OrangeJuiceDecorator(DrinkDecorator):
    surcharge = Decimal("1.50")
    label = "Orange Juice"

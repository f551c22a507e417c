"""Without decorator: subclass explosion and boolean flags.

Approach 1 needs a class per mixer combination (2^N classes for N mixers).
Approach 2 keeps one class with a flag per mixer, so every new mixer edits
both cost and description, and "extra ice" cannot be expressed at all.
"""

from __future__ import annotations

from decimal import Decimal


# ---------------------------------------------------------------------------
# Approach 1: one subclass per combination
# ---------------------------------------------------------------------------

class Whiskey:
    @property
    def cost(self) -> Decimal:
        return Decimal("5.00")

    @property
    def description(self) -> str:
        return "Whiskey"


class WhiskeyWithIce(Whiskey):
    @property
    def cost(self) -> Decimal:
        return super().cost + Decimal("0.00")

    @property
    def description(self) -> str:
        return super().description + ", Ice"


class WhiskeyWithCoke(Whiskey):
    @property
    def cost(self) -> Decimal:
        return super().cost + Decimal("1.00")

    @property
    def description(self) -> str:
        return super().description + ", Coke"


class WhiskeyWithIceAndCoke(Whiskey):
    @property
    def cost(self) -> Decimal:
        return super().cost + Decimal("0.00") + Decimal("1.00")

    @property
    def description(self) -> str:
        return super().description + ", Ice, Coke"


class WhiskeyWithIceAndCokeAndLime(Whiskey):
    @property
    def cost(self) -> Decimal:
        return super().cost + Decimal("0.00") + Decimal("1.00") + Decimal("0.50")

    @property
    def description(self) -> str:
        return super().description + ", Ice, Coke, Lime"


# ---------------------------------------------------------------------------
# Approach 2: boolean flags
# ---------------------------------------------------------------------------

class FlagBasedDrink:
    def __init__(self, ice: bool = False, coke: bool = False, lime: bool = False, soda: bool = False):
        self.has_ice = ice
        self.has_coke = coke
        self.has_lime = lime
        self.has_soda = soda

    @property
    def cost(self) -> Decimal:
        cost = Decimal("5.00")
        if self.has_ice:
            cost += Decimal("0.00")
        if self.has_coke:
            cost += Decimal("1.00")
        if self.has_lime:
            cost += Decimal("0.50")
        if self.has_soda:
            cost += Decimal("1.00")
        return cost

    @property
    def description(self) -> str:
        parts = ["Whiskey"]
        if self.has_ice:
            parts.append("Ice")
        if self.has_coke:
            parts.append("Coke")
        if self.has_lime:
            parts.append("Lime")
        if self.has_soda:
            parts.append("Soda")
        return ", ".join(parts)

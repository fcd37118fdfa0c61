"""Enchantments -- transforms stacked on top of a base weapon.

An enchantment is never equipped on its own.  Applying one to a weapon
appends it to the weapon's chain; every weapon query then folds the chain
over the base values, innermost (first applied) enchantment first.  Each
enchantment therefore only ever sees the value reported by the enchantments
applied before it, which is what makes chain order significant::

    min_effect = e_k(... e_2(e_1(base_min)))

Three transform families cover the known enchantment kinds:

- **FLAT**: add a constant to min, max and every roll.
- **BAND**: add the band bounds to min/max and a fresh random sample from
  the band to every roll.
- **MULTIPLIER**: scale min, max and every roll, rounding half up.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import Field, model_validator

from .base import Item

if TYPE_CHECKING:
    from combatgame.sim.core.rng import GameRNG


class EnchantmentKind(str, Enum):
    """The enchantments stocked by the shop."""

    DAMAGE_II = "DAMAGE_II"
    DAMAGE_V = "DAMAGE_V"
    FIRE_DAMAGE = "FIRE_DAMAGE"
    POWER = "POWER"


class TransformFamily(str, Enum):
    FLAT = "FLAT"
    BAND = "BAND"
    MULTIPLIER = "MULTIPLIER"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class Enchantment(Item):
    """A single link in a weapon's enchantment chain."""

    kind: Literal["enchantment"] = "enchantment"
    enchantment_kind: EnchantmentKind
    family: TransformFamily
    bonus_min: int = 0
    """Lower bound added by FLAT/BAND enchantments."""

    bonus_max: int = 0
    """Upper bound added by FLAT/BAND enchantments (equal to ``bonus_min``
    for FLAT)."""

    multiplier: float = 1.0
    """Scale factor used by MULTIPLIER enchantments."""

    @model_validator(mode="after")
    def _check_band(self) -> Enchantment:
        if self.bonus_min > self.bonus_max:
            raise ValueError(
                f"bonus_min ({self.bonus_min}) must be <= bonus_max ({self.bonus_max})"
            )
        return self

    # -- item interface ------------------------------------------------------

    @property
    def min_effect(self) -> int:
        return self.bonus_min

    @property
    def max_effect(self) -> int:
        return self.bonus_max

    @property
    def description(self) -> str:
        if self.family == TransformFamily.MULTIPLIER:
            return f"{self.name} [x{self.multiplier} ATT]"
        if self.bonus_min == self.bonus_max:
            return f"{self.name} [+{self.bonus_min} ATT]"
        return f"{self.name} [+{self.bonus_min}-{self.bonus_max} ATT]"

    # -- chain transforms ----------------------------------------------------

    def min_effect_of(self, next_min: int) -> int:
        """Minimum damage of a weapon whose inner chain reports *next_min*."""
        if self.family == TransformFamily.MULTIPLIER:
            return _round_half_up(next_min * self.multiplier)
        return next_min + self.bonus_min

    def max_effect_of(self, next_max: int) -> int:
        """Maximum damage of a weapon whose inner chain reports *next_max*."""
        if self.family == TransformFamily.MULTIPLIER:
            return _round_half_up(next_max * self.multiplier)
        return next_max + self.bonus_max

    def roll_damage_of(self, next_roll: int, rng: GameRNG) -> int:
        """Transform a damage roll produced by the inner chain.

        BAND enchantments draw a fresh sample on every call.
        """
        if self.family == TransformFamily.MULTIPLIER:
            return _round_half_up(next_roll * self.multiplier)
        if self.family == TransformFamily.BAND:
            return next_roll + rng.random_int(self.bonus_min, self.bonus_max)
        return next_roll + self.bonus_min


# ---------------------------------------------------------------------------
# Enchantment table
# ---------------------------------------------------------------------------

_ENCHANTMENT_SPECS: dict[EnchantmentKind, dict] = {
    EnchantmentKind.DAMAGE_II: dict(
        name="Damage II", cost=10, family=TransformFamily.FLAT,
        bonus_min=5, bonus_max=5,
    ),
    EnchantmentKind.DAMAGE_V: dict(
        name="Damage V", cost=5, family=TransformFamily.FLAT,
        bonus_min=5, bonus_max=5,
    ),
    EnchantmentKind.FIRE_DAMAGE: dict(
        name="Fire Damage", cost=20, family=TransformFamily.BAND,
        bonus_min=5, bonus_max=10,
    ),
    EnchantmentKind.POWER: dict(
        name="Power", cost=10, family=TransformFamily.MULTIPLIER,
        multiplier=1.1,
    ),
}


def make_enchantment(kind: EnchantmentKind) -> Enchantment:
    """Build a fresh enchantment item of the given *kind*."""
    return Enchantment(enchantment_kind=kind, **_ENCHANTMENT_SPECS[kind])


def all_enchantments() -> list[Enchantment]:
    """One fresh enchantment of every kind, in declaration order."""
    return [make_enchantment(kind) for kind in EnchantmentKind]

"""Item definitions -- weapons, armour and potions.

All item models are Pydantic v2 models so that catalog records validate on
construction.  ``AnyItem`` is the discriminated union used wherever a
heterogeneous list of items is stored (inventories, shop stock, catalogs).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import Field, model_validator

from .base import Item, new_item_id
from .enchantments import Enchantment

if TYPE_CHECKING:
    from combatgame.sim.core.rng import GameRNG


class PotionType(str, Enum):
    """Polarity of a potion.  Any other value is rejected on construction."""

    HEALING = "HEALING"
    DAMAGE = "DAMAGE"


def _check_range(low: int, high: int, label: str) -> None:
    if low > high:
        raise ValueError(f"min {label} ({low}) must be <= max {label} ({high})")


# ---------------------------------------------------------------------------
# Weapon
# ---------------------------------------------------------------------------

class Weapon(Item):
    """A base weapon plus the ordered chain of enchantments applied to it.

    ``min_damage``/``max_damage`` and ``cost`` are the base weapon's own
    values.  The ``min_effect``, ``max_effect``, :meth:`roll_damage` and
    ``total_cost`` queries fold the enchantment chain over them.
    """

    kind: Literal["weapon"] = "weapon"
    min_damage: int = Field(ge=0)
    max_damage: int = Field(ge=0)
    damage_type: str
    weapon_type: str
    enchantments: list[Enchantment] = Field(default_factory=list)
    """Applied enchantments, first applied first."""

    @model_validator(mode="after")
    def _check_damage_range(self) -> Weapon:
        _check_range(self.min_damage, self.max_damage, "damage")
        return self

    @property
    def min_effect(self) -> int:
        value = self.min_damage
        for enchantment in self.enchantments:
            value = enchantment.min_effect_of(value)
        return value

    @property
    def max_effect(self) -> int:
        value = self.max_damage
        for enchantment in self.enchantments:
            value = enchantment.max_effect_of(value)
        return value

    def roll_damage(self, rng: GameRNG) -> int:
        """Roll the base weapon, then pass the roll through every enchantment."""
        value = rng.random_int(self.min_damage, self.max_damage)
        for enchantment in self.enchantments:
            value = enchantment.roll_damage_of(value, rng)
        return value

    @property
    def total_cost(self) -> int:
        return self.cost + sum(e.cost for e in self.enchantments)

    @property
    def is_enchanted(self) -> bool:
        return bool(self.enchantments)

    def enchant(self, enchantment: Enchantment) -> Weapon:
        """Return a new weapon with *enchantment* appended to the chain.

        The receiver is left untouched.
        """
        return self.model_copy(
            update={
                "id": new_item_id(),
                "enchantments": [*self.enchantments, enchantment],
            },
        )

    @property
    def description(self) -> str:
        text = (
            f"{self.name} | {self.damage_type} {self.weapon_type} | "
            f"ATT: {self.min_effect}-{self.max_effect}"
        )
        for enchantment in self.enchantments:
            text += f" | {enchantment.description}"
        return text


# ---------------------------------------------------------------------------
# Armour
# ---------------------------------------------------------------------------

class Armour(Item):
    kind: Literal["armour"] = "armour"
    min_defence: int = Field(ge=0)
    max_defence: int = Field(ge=0)
    material: str

    @model_validator(mode="after")
    def _check_defence_range(self) -> Armour:
        _check_range(self.min_defence, self.max_defence, "defence")
        return self

    @property
    def min_effect(self) -> int:
        return self.min_defence

    @property
    def max_effect(self) -> int:
        return self.max_defence

    @property
    def description(self) -> str:
        return f"{self.name} | {self.material} | DEF: {self.min_defence}-{self.max_defence}"


# ---------------------------------------------------------------------------
# Potion
# ---------------------------------------------------------------------------

class Potion(Item):
    """Single-use consumable; removed from the inventory when drunk."""

    kind: Literal["potion"] = "potion"
    min_value: int = Field(ge=0)
    max_value: int = Field(ge=0)
    potion_type: PotionType

    @model_validator(mode="after")
    def _check_value_range(self) -> Potion:
        _check_range(self.min_value, self.max_value, "value")
        return self

    @property
    def min_effect(self) -> int:
        return self.min_value

    @property
    def max_effect(self) -> int:
        return self.max_value

    @property
    def is_healing(self) -> bool:
        return self.potion_type == PotionType.HEALING

    def roll_effect(self, rng: GameRNG) -> int:
        return rng.random_int(self.min_value, self.max_value)

    @property
    def description(self) -> str:
        label = "HEL" if self.is_healing else "ATT"
        return f"{self.name} | {label}: {self.min_value}-{self.max_value}"


AnyItem = Annotated[
    Union[Weapon, Armour, Potion, Enchantment],
    Field(discriminator="kind"),
]

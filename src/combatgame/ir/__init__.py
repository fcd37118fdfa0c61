"""Static game definitions: items, enchantments and enemy species.

Every definition is a Pydantic model, so catalog data validates as it is
loaded and serialises cleanly to/from JSON.
"""

from .base import Item
from .enchantments import (
    Enchantment,
    EnchantmentKind,
    TransformFamily,
    all_enchantments,
    make_enchantment,
)
from .items import AnyItem, Armour, Potion, PotionType, Weapon
from .species import RARE_BOSS, SPECIES_TABLE, Species, SpeciesDefinition, get_species

__all__ = [
    # items
    "Item",
    "AnyItem",
    "Weapon",
    "Armour",
    "Potion",
    "PotionType",
    # enchantments
    "Enchantment",
    "EnchantmentKind",
    "TransformFamily",
    "make_enchantment",
    "all_enchantments",
    # species
    "Species",
    "SpeciesDefinition",
    "SPECIES_TABLE",
    "RARE_BOSS",
    "get_species",
]

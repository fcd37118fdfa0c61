"""Enemy species -- the four fixed enemy archetypes and their constants.

Species are a closed set.  Each carries its stat constants here; the
matching special ability lives in
:mod:`combatgame.sim.mechanics.abilities` and is selected by dispatching
on the :class:`Species` tag.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Species(str, Enum):
    """Enemy species, in ascending tier order."""

    SLIME = "SLIME"
    GOBLIN = "GOBLIN"
    OGRE = "OGRE"
    DRAGON = "DRAGON"


RARE_BOSS = Species.DRAGON
"""Defeating this species completes the game."""


class SpeciesDefinition(BaseModel):
    species: Species
    name: str
    tier: int
    min_defence: int
    max_defence: int
    max_health: int
    min_attack: int
    max_attack: int
    gold_reward: int
    ability_chance: float
    """Probability that the special ability triggers on an attack."""


SPECIES_TABLE: dict[Species, SpeciesDefinition] = {
    Species.SLIME: SpeciesDefinition(
        species=Species.SLIME, name="Slime", tier=0,
        min_defence=0, max_defence=2, max_health=10,
        min_attack=3, max_attack=5, gold_reward=10,
        ability_chance=0.20,
    ),
    Species.GOBLIN: SpeciesDefinition(
        species=Species.GOBLIN, name="Goblin", tier=1,
        min_defence=4, max_defence=8, max_health=30,
        min_attack=3, max_attack=8, gold_reward=20,
        ability_chance=0.50,
    ),
    Species.OGRE: SpeciesDefinition(
        species=Species.OGRE, name="Ogre", tier=2,
        min_defence=6, max_defence=12, max_health=40,
        min_attack=5, max_attack=10, gold_reward=40,
        ability_chance=0.20,
    ),
    Species.DRAGON: SpeciesDefinition(
        species=Species.DRAGON, name="Dragon", tier=3,
        min_defence=15, max_defence=20, max_health=100,
        min_attack=15, max_attack=30, gold_reward=100,
        ability_chance=0.35,
    ),
}


def get_species(species: Species) -> SpeciesDefinition:
    return SPECIES_TABLE[species]

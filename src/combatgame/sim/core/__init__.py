"""Core simulation primitives for the combat engine."""

from combatgame.sim.core.entities import (
    Attack,
    Character,
    Defence,
    Enemy,
    Player,
)
from combatgame.sim.core.events import CharacterEvent, CharacterObserver, CombatantState
from combatgame.sim.core.inventory import Inventory
from combatgame.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "Attack",
    "Defence",
    "Character",
    "Player",
    "Enemy",
    # events
    "CharacterEvent",
    "CharacterObserver",
    "CombatantState",
    # inventory
    "Inventory",
]

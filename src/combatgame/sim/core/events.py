"""Character events and the listener interface used to observe them.

Characters own their listener list; there is no global registry.  A
battle attaches its listeners when it starts and detaches them when it
ends.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Character


class CharacterEvent(str, Enum):
    ATTACK = "ATTACK"
    """Raised before an attack is computed."""

    DEATH = "DEATH"
    """Raised exactly once, when health first reaches 0."""


class CombatantState(str, Enum):
    """Where a character is in the turn cycle."""

    IDLE = "IDLE"
    ATTACKING = "ATTACKING"
    DEFENDING = "DEFENDING"
    DEAD = "DEAD"


class CharacterObserver:
    """Listener for character events.  Override only what you need."""

    def on_attack(self, character: Character) -> None:
        pass

    def on_death(self, character: Character) -> None:
        pass

    def notify(self, event: CharacterEvent, character: Character) -> None:
        if event == CharacterEvent.ATTACK:
            self.on_attack(character)
        elif event == CharacterEvent.DEATH:
            self.on_death(character)

"""Bridge between the player's ATTACK event and a :class:`PlayAgent`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from combatgame.sim.core.events import CharacterObserver

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Player
    from combatgame.sim.play_agents.base import PlayAgent


class PlayerController(CharacterObserver):
    """Answers the player's attack request by asking *agent*."""

    def __init__(self, agent: PlayAgent) -> None:
        self.agent = agent

    def on_attack(self, character: Player) -> None:
        character.set_next_attack(self.agent.choose_attack(character))

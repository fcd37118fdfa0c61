"""Base class for agents that drive the player character.

The turn engine never decides what the player does.  When the player is
asked to attack it raises an ATTACK event; the attached
:class:`~combatgame.sim.play_agents.controller.PlayerController` forwards
the request to a ``PlayAgent`` and hands the answer back to the player.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Attack, Player
    from combatgame.sim.shop import Shop


class PlayAgent(ABC):
    """Base class for automated players."""

    @abstractmethod
    def choose_attack(self, player: Player) -> Attack:
        """Decide the player's action for this half-turn.

        Parameters
        ----------
        player:
            The player about to attack.  Agents may consume items from its
            inventory (e.g. drink a potion) while choosing.

        Returns
        -------
        Attack
            The attack to resolve against the enemy.  A 0-damage attack is
            legal and means the enemy does not defend.
        """

    def visit_shop(self, player: Player, shop: Shop) -> None:
        """Spend gold between battles.  The default agent buys nothing."""

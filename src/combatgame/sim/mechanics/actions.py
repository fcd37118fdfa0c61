"""Player actions -- turn a player's choice into an :class:`Attack`.

These are the building blocks agents use to answer the engine's attack
request: swing the equipped weapon, or drink a potion from the inventory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from combatgame.sim.core.entities import Attack

if TYPE_CHECKING:
    from combatgame.ir.items import Potion
    from combatgame.sim.core.entities import Player
    from combatgame.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


def swing_weapon(player: Player, rng: GameRNG) -> Attack:
    """Attack with the equipped weapon, rolling through its enchantment chain."""
    damage = player.weapon.roll_damage(rng)
    return Attack(
        damage=damage,
        description=[
            f"{player.name} attacked with {player.weapon.description}, "
            f"dealing {damage}DP."
        ],
    )


def drink_potion(player: Player, potion: Potion, rng: GameRNG) -> Attack:
    """Consume *potion* from the player's inventory.

    A healing potion restores health and produces a 0-damage attack (so the
    enemy does not defend).  A damage potion produces an attack of the
    rolled effect.

    Raises
    ------
    ValueError
        If the potion is not in the player's inventory.
    """
    if not player.take_item(potion):
        raise ValueError(f"{potion.name!r} is not in {player.name}'s inventory")

    amount = potion.roll_effect(rng)
    if potion.is_healing:
        player.modify_health(amount)
        logger.debug("%s drank %s for %d HP", player.name, potion.name, amount)
        return Attack(
            damage=0,
            description=[f"{player.name} used {potion.name}, gaining {amount}HP."],
        )

    return Attack(
        damage=amount,
        description=[
            f"{player.name} attacked with {potion.name}, dealing {amount}DP."
        ],
    )

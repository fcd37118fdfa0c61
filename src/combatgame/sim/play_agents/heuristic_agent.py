"""Heuristic agent -- a hand-written policy using simple game knowledge.

- **Combat**: drink the strongest healing potion when health is low; throw
  a damage potion when its average beats the weapon's average; otherwise
  swing the weapon.
- **Shop**: keep one healing potion in stock, upgrade armour when a
  clearly better piece is affordable, then buy the enchantment with the
  best expected damage gain per gold and apply it straight away.  A gold
  reserve is kept back for the next healing potion.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from combatgame.ir.enchantments import Enchantment
from combatgame.ir.items import Armour, Potion
from combatgame.sim.core.rng import GameRNG
from combatgame.sim.mechanics.actions import drink_potion, swing_weapon
from combatgame.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from combatgame.ir.items import Weapon
    from combatgame.sim.core.entities import Attack, Player
    from combatgame.sim.shop import Shop

logger = logging.getLogger(__name__)


def _average(low: int, high: int) -> float:
    return (low + high) / 2


def _enchantment_gain(enchantment: Enchantment, weapon: Weapon) -> float:
    """Expected increase in average damage from adding *enchantment*."""
    low, high = weapon.min_effect, weapon.max_effect
    return _average(
        enchantment.min_effect_of(low), enchantment.max_effect_of(high),
    ) - _average(low, high)


class HeuristicAgent(PlayAgent):
    """Threshold-based policy for combat and shopping.

    Parameters
    ----------
    rng:
        RNG used for weapon and potion rolls.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    heal_threshold:
        Fraction of max health at or below which a healing potion is drunk.
    gold_reserve:
        Gold kept back when buying upgrades.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        heal_threshold: float = 0.4,
        gold_reserve: int = 20,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._heal_threshold = heal_threshold
        self._gold_reserve = gold_reserve

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------

    def choose_attack(self, player: Player) -> Attack:
        potions = player.inventory.potions()
        healing = [p for p in potions if p.is_healing]
        damaging = [p for p in potions if not p.is_healing]

        missing = player.max_health - player.health
        if healing and player.health <= player.max_health * self._heal_threshold:
            # Smallest potion that covers the missing health, else the largest
            covering = [p for p in healing if p.max_value >= missing]
            if covering:
                best = min(covering, key=lambda p: p.max_value)
            else:
                best = max(healing, key=lambda p: p.max_value)
            return drink_potion(player, best, self._rng)

        if damaging:
            best = max(damaging, key=lambda p: _average(p.min_value, p.max_value))
            weapon_avg = _average(player.min_attack, player.max_attack)
            if _average(best.min_value, best.max_value) > weapon_avg:
                return drink_potion(player, best, self._rng)

        return swing_weapon(player, self._rng)

    # ------------------------------------------------------------------
    # Shopping
    # ------------------------------------------------------------------

    def visit_shop(self, player: Player, shop: Shop) -> None:
        self._restock_healing(player, shop)
        self._upgrade_armour(player, shop)
        self._buy_enchantment(player, shop)

    def _spendable(self, player: Player) -> int:
        return player.gold - self._gold_reserve

    def _restock_healing(self, player: Player, shop: Shop) -> None:
        if any(p.is_healing for p in player.inventory.potions()):
            return
        offers = [
            i for i in shop.items
            if isinstance(i, Potion) and i.is_healing and shop.can_afford(i, player)
        ]
        if offers:
            shop.buy(min(offers, key=shop.price_of), player)

    def _upgrade_armour(self, player: Player, shop: Shop) -> None:
        current = _average(player.min_defence, player.max_defence)
        offers = [
            i for i in shop.items
            if isinstance(i, Armour)
            and _average(i.min_defence, i.max_defence) > current
            and shop.price_of(i) <= self._spendable(player)
        ]
        if not offers:
            return

        choice = max(offers, key=lambda a: _average(a.min_defence, a.max_defence))
        old = player.armour
        bought = shop.buy(choice, player)
        if bought is None:
            return
        player.equip_armour(bought)
        if player.inventory.contains(old):
            shop.sell(old, player)
        logger.debug("%s upgraded armour to %s", player.name, bought.name)

    def _buy_enchantment(self, player: Player, shop: Shop) -> None:
        offers = [
            i for i in shop.items
            if isinstance(i, Enchantment) and shop.price_of(i) <= self._spendable(player)
        ]
        if not offers:
            return

        choice = max(
            offers,
            key=lambda e: _enchantment_gain(e, player.weapon) / max(1, shop.price_of(e)),
        )
        bought = shop.buy(choice, player)
        if bought is None:
            return
        player.enchant_weapon(bought)
        logger.debug("%s enchanted weapon: %s", player.name, player.weapon.description)

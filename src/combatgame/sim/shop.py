"""Shop -- buying and selling items for gold between battles.

The shop only ever touches the player through ``modify_gold`` and the
inventory add/remove calls; it never equips anything.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

from combatgame.ir.enchantments import all_enchantments

if TYPE_CHECKING:
    from combatgame.ir.items import AnyItem
    from combatgame.sim.core.entities import Player

logger = logging.getLogger(__name__)

SELL_RATE = 0.5


class Shop:
    """A list of items for sale.

    Parameters
    ----------
    sell_rate:
        Fraction of an item's price paid back when the player sells it
        (rounded down).
    """

    def __init__(self, sell_rate: float = SELL_RATE) -> None:
        self.sell_rate = sell_rate
        self._stock: list[AnyItem] = []

    def stock(self, items: Sequence[AnyItem]) -> None:
        """Replace the stock with *items* plus one of each enchantment."""
        self._stock = [*items, *all_enchantments()]

    @property
    def items(self) -> list[AnyItem]:
        return list(self._stock)

    def price_of(self, item: AnyItem) -> int:
        return item.total_cost

    def sell_price(self, item: AnyItem) -> int:
        return math.floor(item.total_cost * self.sell_rate)

    def can_afford(self, item: AnyItem, player: Player) -> bool:
        return player.gold >= self.price_of(item)

    def buy(self, item: AnyItem, player: Player) -> AnyItem | None:
        """Sell a fresh copy of *item* to *player*.

        Returns the copy placed in the player's inventory, or ``None`` if
        the player cannot afford it or has no free slot.  Stock is never
        depleted.
        """
        price = self.price_of(item)
        if player.gold < price:
            logger.debug("%s cannot afford %s (%dG < %dG)", player.name, item.name, player.gold, price)
            return None
        if not player.has_inventory_space:
            logger.debug("%s has no room for %s", player.name, item.name)
            return None

        bought = item.clone()
        player.give_item(bought)
        player.modify_gold(-price)
        logger.debug("%s bought %s for %dG", player.name, item.name, price)
        return bought

    def sell(self, item: AnyItem, player: Player) -> int:
        """Take *item* from *player* and pay them the sell price.

        Raises
        ------
        ValueError
            If the item is not in the player's inventory.
        """
        if not player.take_item(item):
            raise ValueError(f"{item.name!r} is not in {player.name}'s inventory")
        price = self.sell_price(item)
        player.modify_gold(price)
        logger.debug("%s sold %s for %dG", player.name, item.name, price)
        return price

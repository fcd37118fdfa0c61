"""Bounded item container carried by the player."""

from __future__ import annotations

from pydantic import BaseModel, Field

from combatgame.ir.enchantments import Enchantment
from combatgame.ir.items import AnyItem, Armour, Potion, Weapon

DEFAULT_SLOTS = 15


class Inventory(BaseModel):
    """Ordered list of items with a fixed number of slots.

    Items are matched by instance ``id``, so removing one copy of a potion
    leaves other copies of the same potion in place.
    """

    slots: int = Field(default=DEFAULT_SLOTS, ge=0)
    items: list[AnyItem] = Field(default_factory=list)

    # -- queries -------------------------------------------------------------

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.slots

    @property
    def free_slots(self) -> int:
        return max(0, self.slots - len(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def contains(self, item: AnyItem) -> bool:
        return any(i.id == item.id for i in self.items)

    def all_items(self) -> list[AnyItem]:
        return list(self.items)

    def weapons(self) -> list[Weapon]:
        return [i for i in self.items if isinstance(i, Weapon)]

    def armour(self) -> list[Armour]:
        return [i for i in self.items if isinstance(i, Armour)]

    def potions(self) -> list[Potion]:
        return [i for i in self.items if isinstance(i, Potion)]

    def enchantments(self) -> list[Enchantment]:
        return [i for i in self.items if isinstance(i, Enchantment)]

    # -- mutation ------------------------------------------------------------

    def add(self, item: AnyItem) -> bool:
        """Add *item* if a slot is free.  Returns whether it was added."""
        if self.is_full:
            return False
        self.items.append(item)
        return True

    def add_all(self, items: list[AnyItem]) -> int:
        """Add as many of *items* as fit, in order.  Returns the count added."""
        accepted = items[: self.free_slots]
        self.items.extend(accepted)
        return len(accepted)

    def remove(self, item: AnyItem) -> bool:
        """Remove *item* by ``id``.  Returns ``False`` if it was not present."""
        for idx, held in enumerate(self.items):
            if held.id == item.id:
                del self.items[idx]
                return True
        return False

    def remove_at(self, index: int) -> AnyItem:
        return self.items.pop(index)

    def clear(self) -> None:
        self.items.clear()

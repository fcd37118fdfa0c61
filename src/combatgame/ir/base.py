"""Common base for every item the player can carry."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


def new_item_id() -> str:
    return uuid.uuid4().hex


class Item(BaseModel, ABC):
    """Abstract item: a name, a cost and an effect range.

    Each physical copy has its own ``id`` so that two potions bought from
    the same shop entry are tracked as separate inventory items.
    """

    id: str = Field(default_factory=new_item_id)
    name: str
    cost: int = Field(ge=0)
    """The item's own price.  See :attr:`total_cost` for composite items."""

    # -- effect range --------------------------------------------------------

    @property
    @abstractmethod
    def min_effect(self) -> int:
        """Lowest value the item can produce."""

    @property
    @abstractmethod
    def max_effect(self) -> int:
        """Highest value the item can produce."""

    @property
    def total_cost(self) -> int:
        """Price of the item including anything attached to it."""
        return self.cost

    @property
    def description(self) -> str:
        return f"{self.name} | {self.min_effect}-{self.max_effect}"

    def clone(self):
        """Return a deep copy carrying a fresh instance ``id``."""
        return self.model_copy(update={"id": new_item_id()}, deep=True)

    def __str__(self) -> str:
        return f"{self.description} | {self.total_cost}G"

"""Item catalog -- loads the weapons, armour and potions sold in the shop.

The catalog is a JSON list of records, each tagged with a ``kind``::

    {"kind": "weapon", "name": "Short Sword", "min_damage": 5, ...}

Records are validated one at a time.  A record that is malformed (missing
fields, bad numbers, unknown kind, a potion that is neither healing nor
damage) is logged and skipped; the rest of the catalog still loads.  Only
a file that cannot be read at all raises :class:`CatalogLoadError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel

from combatgame.ir.items import AnyItem, Armour, Potion, Weapon

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "catalog.json"

_ITEM_MODELS: dict[str, type[BaseModel]] = {
    "weapon": Weapon,
    "armour": Armour,
    "potion": Potion,
}


class CatalogLoadError(RuntimeError):
    """Raised when the catalog file is missing, unreadable or not a list."""


def _parse_item(raw: Any) -> AnyItem:
    """Validate one raw record into an item model."""
    if not isinstance(raw, dict):
        raise ValueError(f"expected an object, got {type(raw).__name__}")
    kind = raw.get("kind")
    if not isinstance(kind, str) or kind not in _ITEM_MODELS:
        raise ValueError(f"unknown item kind {kind!r}")
    return _ITEM_MODELS[kind].model_validate(raw)


def parse_catalog(records: Sequence[Any]) -> list[AnyItem]:
    """Parse raw catalog records, skipping the malformed ones.

    Parameters
    ----------
    records:
        Decoded JSON records, in catalog order.

    Returns
    -------
    list[AnyItem]
        Items for every valid record, in the same order.
    """
    items: list[AnyItem] = []
    for index, raw in enumerate(records):
        try:
            items.append(_parse_item(raw))
        except ValueError as exc:
            # pydantic.ValidationError is a ValueError
            logger.warning("Catalog record %d is not a valid item, skipping: %s", index, exc)
    return items


def load_catalog(path: str | Path | None = None) -> list[AnyItem]:
    """Load the item catalog from a JSON file.

    Parameters
    ----------
    path:
        Path to the JSON file.  Defaults to the catalog shipped with the
        package.

    Raises
    ------
    CatalogLoadError
        If the file cannot be read or does not contain a JSON list.
    """
    if path is None:
        path = _DEFAULT_CATALOG_PATH
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            raw_items = json.load(f)
    except (OSError, ValueError) as exc:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        raise CatalogLoadError(f"Error loading items from {path}: {exc}") from exc

    if not isinstance(raw_items, list):
        raise CatalogLoadError(
            f"Error loading items from {path}: expected a list of records"
        )

    items = parse_catalog(raw_items)
    logger.debug("Loaded %d of %d catalog records from %s", len(items), len(raw_items), path)
    return items


def starter_items(items: Sequence[AnyItem]) -> tuple[Weapon, Armour]:
    """Return the cheapest weapon and the cheapest armour in *items*.

    Raises
    ------
    ValueError
        If *items* has no weapon or no armour.
    """
    weapons = [i for i in items if isinstance(i, Weapon)]
    armour = [i for i in items if isinstance(i, Armour)]
    if not weapons or not armour:
        raise ValueError("The catalog needs at least one weapon and one armour")
    return min(weapons, key=lambda w: w.cost), min(armour, key=lambda a: a.cost)

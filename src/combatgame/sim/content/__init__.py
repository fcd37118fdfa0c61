"""Item catalog loading."""

from .catalog import CatalogLoadError, load_catalog, parse_catalog, starter_items

__all__ = ["CatalogLoadError", "load_catalog", "parse_catalog", "starter_items"]

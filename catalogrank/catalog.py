"""Product catalog loading and search over the ranking engine."""

import json
from pathlib import Path
from typing import Optional

from .config import CATALOG_PATH
from .ranking import RankedResult, rank
from .scoring import SearchableItem

_catalogs: dict[str, list[SearchableItem]] = {}


def load_catalog(path: str = None) -> list[SearchableItem]:
    """Load and cache a catalog file of the form {"items": [...]}."""
    path = str(path or CATALOG_PATH)
    if path in _catalogs:
        return _catalogs[path]

    if not Path(path).exists():
        raise RuntimeError(f"Catalog not found at {path}. Set CATALOG_PATH or pass --catalog.")
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ValueError(f"{path}: expected a JSON object with an 'items' list")

    _catalogs[path] = [SearchableItem.from_record(record) for record in data["items"]]
    return _catalogs[path]


def clear_cache():
    _catalogs.clear()


def filter_by_category(items: list[SearchableItem], category: str) -> list[SearchableItem]:
    """Items whose category equals ``category``, ignoring case."""
    wanted = category.strip().lower()
    return [i for i in items if i.category and i.category.strip().lower() == wanted]


def build_vocabulary(items: list[SearchableItem]) -> list[str]:
    """Distinct words from item names and categories, first occurrence first."""
    terms = {}
    for item in items:
        for text in (item.name, item.category or ""):
            for word in text.split():
                terms.setdefault(word.lower(), word)
    return list(terms.values())


def search(
    query: str,
    items: list[SearchableItem] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    category: Optional[str] = None,
    limit: Optional[int] = None,
    config=None,
) -> list[RankedResult]:
    """Rank the catalog (or ``items``) for a query. Returns the top ``limit``."""
    if items is None:
        items = load_catalog()
    if category:
        items = filter_by_category(items, category)

    kwargs = {"config": config} if config is not None else {}
    results = rank(items, query, min_price, max_price, **kwargs)
    return results[:limit] if limit is not None else results


def get_top_items(n: int = 20, items: list[SearchableItem] = None) -> list[RankedResult]:
    """Top N items by featured flag, rating and review count."""
    if items is None:
        items = load_catalog()
    return rank(items, "")[:n]

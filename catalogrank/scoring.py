"""Per-item relevance scoring with an explainable factor breakdown."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .config import DEFAULT_SCORING, FACTOR_KEYS, FACTOR_LABELS, ScoringConfig
from .fuzzy import fuzzy_score, word_overlap


@dataclass(frozen=True)
class SearchableItem:
    """Read-only view of a catalog entry."""
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    in_stock: bool = True
    featured: bool = False

    @classmethod
    def from_record(cls, record: dict) -> "SearchableItem":
        """Build an item from a backend product record.

        Accepts camelCase (``reviewCount``, ``inStock``) or snake_case keys.
        Without an explicit count, ``review_count`` is the length of a
        ``reviews`` list when one is present.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Catalog entry is not an object: {record!r}")
        name = record.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Catalog entry has no name: {record!r}")

        review_count = record.get("reviewCount", record.get("review_count"))
        if review_count is None and isinstance(record.get("reviews"), list):
            review_count = len(record["reviews"])

        in_stock = record.get("inStock", record.get("in_stock"))
        return cls(
            name=name,
            description=_text(name, "description", record.get("description")),
            category=_text(name, "category", record.get("category")),
            price=_number(name, "price", record.get("price"), float),
            rating=_number(name, "rating", record.get("rating"), float),
            review_count=_number(name, "review count", review_count, int),
            in_stock=in_stock is not False,
            featured=record.get("featured") is True,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "price": self.price,
            "rating": self.rating,
            "review_count": self.review_count,
            "in_stock": self.in_stock,
            "featured": self.featured,
        }


def _text(name: str, field_name: str, value) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"{name}: bad {field_name} {value!r}")
    return value


def _number(name: str, field_name: str, value, cast):
    if value is None:
        return None
    # bools are ints to Python but never a valid price or count
    if isinstance(value, bool):
        raise ValueError(f"{name}: bad {field_name} {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name}: bad {field_name} {value!r}")


@dataclass(frozen=True)
class SearchMatch:
    """Final score plus each factor normalised to its own scale.

    The factors are diagnostic: boosts without a factor key and the
    floor at zero mean they do not add back up to ``score``. They are
    exposed as a read-only mapping.
    """
    score: float
    factors: MappingProxyType = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 4),
            "factors": {k: round(v, 4) for k, v in self.factors.items()},
        }


def _normalise(value: float, weight: float) -> float:
    return value / weight if weight else 0.0


def _text_match(query: str, text: str, config: ScoringConfig, scale: float = 1.0) -> float:
    """Best of structural fuzzy match and word overlap, both scaled."""
    return max(
        fuzzy_score(query, text) * scale,
        word_overlap(query, text) * config.overlap_scale * scale,
    )


def _price_relevance(item: SearchableItem, min_price, max_price, config: ScoringConfig) -> float:
    if min_price is None and max_price is None:
        return 0.0
    price = item.price or 0
    in_range = (
        (min_price is None or price >= min_price)
        and (max_price is None or price <= max_price)
    )
    return config.price_match_bonus if in_range else config.price_mismatch_penalty


def score_item(
    query: str,
    item: SearchableItem,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> SearchMatch:
    """Score one catalog item against a query.

    Missing optional fields contribute nothing. Price bounds are inclusive
    and either may be omitted; an item outside them is penalised rather
    than skipped.
    """
    q = query.lower().strip()

    name_match = _text_match(q, item.name, config) * config.name_weight
    description_match = 0.0
    if item.description:
        description_match = (
            _text_match(q, item.description, config, config.description_scale)
            * config.description_weight
        )

    category_match = 0.0
    category_boost = 0.0
    if item.category:
        category_match = fuzzy_score(q, item.category) * config.category_weight
        if q:
            category_boost = min(config.category_boost_cap, len(q.split()))

    in_stock_boost = config.in_stock_boost if item.in_stock is not False else 0.0

    review_score = min((item.review_count or 0) / config.review_normalizer, 1)
    rating_score = (item.rating or 0) / 5 * 0.5
    popularity_boost = (review_score * 0.5 + rating_score) * config.popularity_weight

    featured_boost = config.featured_boost if item.featured else 0.0
    price_relevance = _price_relevance(item, min_price, max_price, config)

    total = (
        name_match
        + description_match
        + category_match
        + category_boost
        + in_stock_boost
        + popularity_boost
        + featured_boost
        + price_relevance
    )

    return SearchMatch(
        score=max(0.0, total),
        factors={
            "nameMatch": _normalise(name_match, config.name_weight),
            "descriptionMatch": _normalise(description_match, config.description_weight),
            "categoryMatch": _normalise(category_match, config.category_weight),
            "categoryBoost": _normalise(category_boost, config.category_boost_cap),
            "popularityBoost": _normalise(popularity_boost, config.popularity_weight),
            "ratingBoost": rating_score,
            "priceRelevance": _normalise(price_relevance, config.price_weight),
        },
    )


def explain(match: SearchMatch) -> list[tuple[str, float]]:
    """Human-readable (label, value) pairs for a match's factors."""
    return [(FACTOR_LABELS[key], match.factors.get(key, 0.0)) for key in FACTOR_KEYS]

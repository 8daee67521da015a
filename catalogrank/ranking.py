"""Catalog ranking and result-set summaries."""

from dataclasses import dataclass
from typing import Optional, Sequence

from .config import DEFAULT_SCORING, FACTOR_KEYS, FACTOR_LABELS, ScoringConfig
from .scoring import SearchableItem, SearchMatch, score_item

MAX_TOP_FACTORS = 3
MAX_RECOMMENDED_FILTERS = 5


@dataclass(frozen=True)
class RankedResult:
    item: SearchableItem
    match: SearchMatch

    def to_dict(self) -> dict:
        return {"item": self.item.to_dict(), "match": self.match.to_dict()}


@dataclass(frozen=True)
class SearchSummary:
    total_results: int = 0
    average_score: float = 0.0
    top_factors: tuple = ()
    recommended_filters: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "top_factors", tuple(self.top_factors))
        object.__setattr__(self, "recommended_filters", tuple(self.recommended_filters))

    def top_factor_labels(self) -> list[str]:
        return [FACTOR_LABELS.get(f, f) for f in self.top_factors]

    def to_dict(self) -> dict:
        return {
            "total_results": self.total_results,
            "average_score": round(self.average_score, 4),
            "top_factors": list(self.top_factors),
            "recommended_filters": list(self.recommended_filters),
        }


def _popularity_key(result: RankedResult):
    item = result.item
    return (not item.featured, -(item.rating or 0), -(item.review_count or 0))


def rank(
    items: Sequence[SearchableItem],
    query: str,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[RankedResult]:
    """Order items by relevance to query.

    With a blank query every item is kept and ordered featured first, then
    by rating, then by review count. Otherwise items scoring 0 are dropped
    and the rest sorted by descending score; ties keep catalog order.
    """
    results = [
        RankedResult(item, score_item(query, item, min_price, max_price, config))
        for item in items
    ]

    if not query or not query.strip():
        return sorted(results, key=_popularity_key)

    return sorted(
        (r for r in results if r.match.score > 0),
        key=lambda r: -r.match.score,
    )


def summarize(results: Sequence[RankedResult]) -> SearchSummary:
    """Average score, most influential factors and category filters."""
    if not results:
        return SearchSummary()

    count = len(results)
    average_score = sum(r.match.score for r in results) / count

    factor_averages = {
        key: sum(r.match.factors.get(key, 0.0) for r in results) / count
        for key in FACTOR_KEYS
    }
    top_factors = sorted(FACTOR_KEYS, key=lambda k: -factor_averages[k])[:MAX_TOP_FACTORS]

    categories = dict.fromkeys(r.item.category for r in results if r.item.category)
    recommended_filters = list(categories)[:MAX_RECOMMENDED_FILTERS]

    return SearchSummary(
        total_results=count,
        average_score=average_score,
        top_factors=top_factors,
        recommended_filters=recommended_filters,
    )

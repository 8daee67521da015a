"""Constants, paths and scoring weights for the catalog ranker."""

import os
from dataclasses import dataclass, replace
from dotenv import load_dotenv

load_dotenv()

CATALOG_PATH = os.getenv("CATALOG_PATH", "./data/catalog.json")
RESULT_LIMIT = int(os.getenv("RESULT_LIMIT", "10"))

# Order matters: the analyzer breaks ties between equal averages by this order.
FACTOR_KEYS = (
    "nameMatch",
    "descriptionMatch",
    "categoryMatch",
    "categoryBoost",
    "popularityBoost",
    "ratingBoost",
    "priceRelevance",
)

FACTOR_LABELS = {
    "nameMatch": "Name Relevance",
    "descriptionMatch": "Description Match",
    "categoryMatch": "Category Match",
    "categoryBoost": "Category Boost",
    "popularityBoost": "Popularity",
    "ratingBoost": "Rating Score",
    "priceRelevance": "Price Match",
}

# Articles, conjunctions, common prepositions and copulas
STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "is", "was",
])

# Vocabulary corrections must beat this fuzzy score
CORRECTION_THRESHOLD = 0.95


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and boosts for the relevance scorer.

    Match weights scale a [0, 1] similarity; boosts are flat additions.
    The price bonus/penalty are normalised by ``price_weight`` when reported
    as a factor, so the default out-of-range price penalty shows up as -2.0.
    """

    name_weight: float = 40.0
    description_weight: float = 20.0
    category_weight: float = 15.0
    category_boost_cap: float = 10.0
    in_stock_boost: float = 5.0
    popularity_weight: float = 10.0
    review_normalizer: float = 500.0
    featured_boost: float = 8.0
    price_weight: float = 10.0
    price_match_bonus: float = 10.0
    price_mismatch_penalty: float = -20.0
    description_scale: float = 0.8
    overlap_scale: float = 0.9


DEFAULT_SCORING = ScoringConfig()

# env var -> ScoringConfig field
_SCORING_ENV = {
    "RANK_NAME_WEIGHT": "name_weight",
    "RANK_DESCRIPTION_WEIGHT": "description_weight",
    "RANK_CATEGORY_WEIGHT": "category_weight",
    "RANK_FEATURED_BOOST": "featured_boost",
    "RANK_IN_STOCK_BOOST": "in_stock_boost",
}


def scoring_config_from_env(base: ScoringConfig = DEFAULT_SCORING) -> ScoringConfig:
    """Return ``base`` with any RANK_* environment overrides applied."""
    overrides = {}
    for var, field in _SCORING_ENV.items():
        raw = os.getenv(var)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field] = float(raw)
        except ValueError:
            raise ValueError(f"{var} must be a number, got '{raw}'")
    return replace(base, **overrides) if overrides else base

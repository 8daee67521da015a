"""Edit distance and fuzzy string similarity."""

from rapidfuzz.distance import Levenshtein

# Edit-distance matches only count above this similarity, and are discounted.
MIN_SIMILARITY = 0.6
EDIT_DISCOUNT = 0.7

# A query word counts as present in a text when it scores above this.
WORD_MATCH_THRESHOLD = 0.8

# Structural rules, tried in order; the first that holds sets the score.
_MATCH_RULES = (
    (lambda q, t: t == q, 1.0),
    (lambda q, t: t.startswith(q), 0.95),
    (lambda q, t: q in t, 0.85),
    (lambda q, t: any(w.startswith(q) for w in t.split()), 0.80),
)


def edit_distance(a: str, b: str) -> int:
    """Case-insensitive Levenshtein distance (unit insert/delete/substitute)."""
    return Levenshtein.distance(a.lower(), b.lower())


def fuzzy_score(query: str, text: str) -> float:
    """Similarity of query to text in [0, 1].

    Exact, prefix, substring and word-prefix matches score 1.0, 0.95, 0.85
    and 0.80. Anything else falls back to normalised edit distance, which
    only counts above 60% similarity and is scaled by 0.7.
    """
    q = query.lower().strip()
    t = text.lower().strip()

    for matches, score in _MATCH_RULES:
        if matches(q, t):
            return score

    similarity = 1 - edit_distance(q, t) / max(len(q), len(t))
    return similarity * EDIT_DISCOUNT if similarity > MIN_SIMILARITY else 0.0


def word_overlap(query: str, text: str) -> float:
    """Fraction of query words that fuzzy-match some word of text."""
    query_words = query.lower().split()
    text_words = text.lower().split()
    if not query_words or not text_words:
        return 0.0

    matched = sum(
        1 for qw in query_words
        if any(fuzzy_score(qw, tw) > WORD_MATCH_THRESHOLD for tw in text_words)
    )
    return matched / len(query_words)

"""Query helpers: keyword extraction and "did you mean" corrections."""

from typing import Optional, Sequence

from .config import CORRECTION_THRESHOLD, STOP_WORDS
from .fuzzy import fuzzy_score


def keywords(query: str) -> list[str]:
    """Lowercased query words longer than two characters, minus stop words."""
    return [w for w in query.lower().split() if len(w) > 2 and w not in STOP_WORDS]


def suggest_correction(
    query: str,
    vocabulary: Sequence[str],
    threshold: float = CORRECTION_THRESHOLD,
) -> Optional[str]:
    """Replace each query word with its best vocabulary match above threshold.

    Returns None when no word was replaced. Words without a confident
    match are kept as typed (lowercased).
    """
    corrected = []
    replaced = False
    for word in query.lower().split():
        best_match = word
        best_score = threshold
        for term in vocabulary:
            score = fuzzy_score(word, term)
            if score > best_score:
                best_score = score
                best_match = term
                replaced = True
        corrected.append(best_match)

    return " ".join(corrected) if replaced else None

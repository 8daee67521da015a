"""Tests for keyword extraction and query correction."""

from __future__ import annotations

from catalogrank.query import keywords, suggest_correction


def test_keywords_drop_stop_words_and_short_words() -> None:
    assert keywords("The best Sofa for a small room") == ["best", "sofa", "small", "room"]


def test_keywords_keep_order_and_duplicates() -> None:
    assert keywords("oak table and oak chairs") == ["oak", "table", "oak", "chairs"]


def test_keywords_empty() -> None:
    assert keywords("") == []
    assert keywords("   ") == []
    assert keywords("a to of") == []


def test_correction_none_without_confident_match() -> None:
    assert suggest_correction("lamp", ["Sofa", "Chair"]) is None


def test_correction_replaces_only_matched_words() -> None:
    assert suggest_correction("SOFA tabel", ["Sofa", "Chair"]) == "Sofa tabel"


def test_correction_keeps_exact_vocabulary_words() -> None:
    assert suggest_correction("sofa chair", ["sofa", "chair", "sofas"]) == "sofa chair"


def test_correction_rejects_prefix_matches() -> None:
    # a prefix match scores 0.95, which does not beat the threshold
    assert suggest_correction("sof", ["sofa"]) is None


def test_correction_threshold_is_configurable() -> None:
    assert suggest_correction("sof", ["sofa"], threshold=0.9) == "sofa"


def test_correction_empty_inputs() -> None:
    assert suggest_correction("", ["sofa"]) is None
    assert suggest_correction("sofa", []) is None

"""Tests for edit distance, fuzzy similarity and word overlap."""

from __future__ import annotations

import pytest

from catalogrank.fuzzy import edit_distance, fuzzy_score, word_overlap


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("Sofa", "sofa", 0),
        ("", "chair", 5),
        ("desk", "", 4),
        ("flaw", "lawn", 2),
    ],
)
def test_edit_distance(a: str, b: str, expected: int) -> None:
    assert edit_distance(a, b) == expected
    assert edit_distance(b, a) == expected


def test_edit_distance_of_string_with_itself_is_zero() -> None:
    assert edit_distance("Walnut Bookshelf", "walnut bookshelf") == 0


def test_structural_matches_score_in_priority_order() -> None:
    text = "Sofa Bed"
    exact = fuzzy_score("sofa bed", text)
    prefix = fuzzy_score("sofa", text)
    substring = fuzzy_score("fa be", text)

    assert exact == 1.0
    assert prefix == 0.95
    assert substring == 0.85
    assert exact >= prefix >= substring


def test_inputs_are_trimmed_and_case_folded() -> None:
    assert fuzzy_score("  OAK Table ", "oak table") == 1.0


def test_only_exact_match_scores_one() -> None:
    assert fuzzy_score("sofas", "sofa") < 1.0
    assert fuzzy_score("sof", "sofa") < 1.0


def test_typo_falls_back_to_discounted_edit_similarity() -> None:
    # one substitution in four characters -> similarity 0.75
    assert fuzzy_score("sofs", "sofa") == pytest.approx(0.75 * 0.7)


def test_dissimilar_strings_score_zero() -> None:
    assert fuzzy_score("lamp", "sofa") == 0.0
    assert fuzzy_score("chair", "") == 0.0


def test_word_overlap_ignores_word_order() -> None:
    assert word_overlap("sofa leather", "Modern Leather Sofa") == 1.0


def test_word_overlap_counts_partial_matches() -> None:
    assert word_overlap("sofa table", "Modern Leather Sofa") == 0.5


def test_word_overlap_requires_a_strong_word_match() -> None:
    # "sofs" is only an edit-distance match for "sofa", which stays below 0.8
    assert word_overlap("sofs", "leather sofa") == 0.0


def test_word_overlap_empty_inputs() -> None:
    assert word_overlap("", "sofa") == 0.0
    assert word_overlap("sofa", "   ") == 0.0

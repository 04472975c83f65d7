import pytest

from app.spellcheck.distance import confidence_for_distance, levenshtein_distance


@pytest.mark.parametrize(
    "source,target,expected",
    [
        ("salm", "salam", 1),
        ("kitten", "sittin", 2),
        ("қала", "қала", 0),
        ("", "ab", 2),
        ("dúnya", "dunya", 1),
    ],
)
def test_known_distances(source: str, target: str, expected: int) -> None:
    assert levenshtein_distance(source, target, max_distance=2) == expected


def test_distance_is_symmetric() -> None:
    pairs = [("salm", "salam"), ("abc", "yabd"), ("qala", "qalalar"), ("men", "salam")]
    for a, b in pairs:
        assert levenshtein_distance(a, b, 2) == levenshtein_distance(b, a, 2)


def test_identical_strings_are_zero() -> None:
    assert levenshtein_distance("qaraqalpaq", "qaraqalpaq", 0) == 0


def test_length_gap_short_circuits() -> None:
    assert levenshtein_distance("a", "abcd", max_distance=2) == 3
    assert levenshtein_distance("", "abc", max_distance=1) == 2


def test_over_budget_reports_max_plus_one() -> None:
    assert levenshtein_distance("aytaman", "salam", max_distance=2) == 3
    assert levenshtein_distance("abcd", "wxyz", max_distance=2) == 3


def test_confidence_decreases_with_distance() -> None:
    assert confidence_for_distance(0) == 100
    assert confidence_for_distance(1) == 75
    assert confidence_for_distance(2) == 50
    assert confidence_for_distance(5) == 0

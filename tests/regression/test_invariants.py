"""
Invariant tests for the quiz functions.

Properties that must hold for every input in a range, plus purity checks.
"""

from copy import deepcopy
from string import ascii_uppercase

import pytest

from linqquiz.components.quiz import (
    ArgumentOutOfRangeError,
    get_even_numbers,
    get_family_statistic,
    get_letter_statistic,
    get_squares,
)


# --- I1: Even numbers ---
@pytest.mark.parametrize("limit", range(1, 60))
def test_I1_even_numbers_properties(limit):
    """I1: Every element even, in [1, limit), ascending, floor((limit-1)/2) long."""
    result = get_even_numbers(limit)

    assert all(n % 2 == 0 for n in result)
    assert all(1 <= n < limit for n in result)
    assert result == sorted(result)
    assert len(result) == (limit - 1) // 2


@pytest.mark.parametrize("limit", [0, -1, -2**31])
def test_I1_even_numbers_reject_non_positive(limit):
    with pytest.raises(ArgumentOutOfRangeError):
        get_even_numbers(limit)


# --- I2: Squares ---
@pytest.mark.parametrize("limit", range(-3, 120, 7))
def test_I2_squares_properties(limit):
    """I2: Squares divisible by 7, strictly descending, roots below limit."""
    result = get_squares(limit)

    assert all(sq % 7 == 0 for sq in result)
    assert result == sorted(result, reverse=True)
    assert len(set(result)) == len(result)
    assert all(round(sq**0.5) < limit for sq in result)
    assert len(result) == max(limit - 1, 0) // 7


# --- I3: Family statistic ---
def test_I3_one_summary_per_family(sample_families):
    """I3: Summaries match families one to one, in order."""
    result = get_family_statistic(sample_families)

    assert len(result) == len(sample_families)
    for family, summary in zip(sample_families, result):
        assert summary.family_id == family.id
        assert summary.number_of_family_members == len(family.persons)
        if family.persons:
            assert summary.average_age == pytest.approx(
                sum(p.age for p in family.persons) / len(family.persons)
            )
        else:
            assert summary.average_age == 0


def test_I3_family_statistic_is_pure(sample_families):
    before = deepcopy(sample_families)

    first = get_family_statistic(sample_families)
    second = get_family_statistic(sample_families)

    assert first == second
    assert first is not second
    assert sample_families == before


# --- I4: Letter statistic ---
@pytest.mark.parametrize(
    "text",
    [
        "",
        "aAbb!! 123",
        "Hello, World!",
        "ZYXWVUTSRQPONMLKJIHGFEDCBA zyxwvutsrqponmlkjihgfedcba",
        "Ünïcödé ñ 42",
    ],
)
def test_I4_letter_statistic_properties(text):
    """I4: A-Z only, alphabetical, positive counts summing to the letter count."""
    result = get_letter_statistic(text)
    letters = [o.letter for o in result]

    assert all(letter in ascii_uppercase for letter in letters)
    assert letters == sorted(set(letters))
    assert all(o.number_of_occurrences > 0 for o in result)
    assert sum(o.number_of_occurrences for o in result) == sum(
        1 for ch in text if ch.isascii() and ch.isalpha()
    )
    assert get_letter_statistic(text) == result

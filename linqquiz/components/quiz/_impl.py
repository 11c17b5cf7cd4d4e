"""
Quiz functional core - sequences, family statistics and letter counts.

Functional Core - pure functions, no I/O.

Key behaviors:
- Even numbers in [1, limit), ascending
- Squares divisible by 7 in descending order, checked against a fixed integer width
- One summary per family, input order preserved
- Case-insensitive A-Z letter tally, zero counts omitted
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_letters, ascii_uppercase

from linqquiz.rules.models import DEFAULT_INTEGER_BITS

from .models import (
    ArgumentOutOfRangeError,
    ArithmeticOverflowError,
    FamilySummary,
    LetterOccurrence,
    MissingArgumentError,
)
from .ports import FamilyPort


# --- Checked Arithmetic ---


def max_signed(integer_bits: int) -> int:
    """Largest value of a signed integer with the given width."""
    return 2 ** (integer_bits - 1) - 1


def checked_square(value: int, integer_bits: int | None = DEFAULT_INTEGER_BITS) -> int:
    """
    Square a value, failing if the result leaves the signed integer range.

    Args:
        value: Number to square
        integer_bits: Signed integer width, or None for unbounded ints

    Raises:
        ArithmeticOverflowError: If the square exceeds the width's maximum
    """
    square = value * value
    if integer_bits is not None and square > max_signed(integer_bits):
        raise ArithmeticOverflowError("square", value, integer_bits)
    return square


# --- Number Sequences ---


def get_even_numbers(exclusive_upper_limit: int) -> list[int]:
    """
    Return all even numbers between 1 and the upper limit (exclusive).

    Raises:
        ArgumentOutOfRangeError: If exclusive_upper_limit is lower than 1
    """
    if exclusive_upper_limit < 1:
        raise ArgumentOutOfRangeError(
            "exclusive_upper_limit", exclusive_upper_limit, "must be at least 1"
        )

    return list(range(2, exclusive_upper_limit, 2))


def get_squares(
    exclusive_upper_limit: int,
    integer_bits: int | None = DEFAULT_INTEGER_BITS,
) -> list[int]:
    """
    Return squares of the numbers between 1 and the upper limit (exclusive)
    that are divisible by 7, in descending order.

    The result is empty if exclusive_upper_limit is 1 or lower.

    Raises:
        ArithmeticOverflowError: If any candidate square overflows integer_bits
    """
    if exclusive_upper_limit <= 1:
        return []

    # Every candidate is squared before filtering, so an overflow anywhere in range fails
    squares = [checked_square(n, integer_bits) for n in range(1, exclusive_upper_limit)]
    return [square for square in reversed(squares) if square % 7 == 0]


# --- Family Statistic ---


def _average_age(family: FamilyPort) -> float:
    persons = family.persons
    if len(persons) == 0:
        return 0.0
    return sum(person.age for person in persons) / len(persons)


def get_family_statistic(families: Iterable[FamilyPort] | None) -> list[FamilySummary]:
    """
    Return one statistic entry per family, in input order.

    average_age is 0 for families without persons.

    Raises:
        MissingArgumentError: If families is None
    """
    if families is None:
        raise MissingArgumentError("families")

    return [
        FamilySummary(
            family_id=family.id,
            number_of_family_members=len(family.persons),
            average_age=_average_age(family),
        )
        for family in families
    ]


# --- Letter Statistic ---


def get_letter_statistic(text: str | None) -> list[LetterOccurrence]:
    """
    Count occurrences of each letter A-Z in a text.

    Casing is ignored. Anything that is not an ASCII letter is skipped.
    Only letters that occur at least once are returned, in alphabetical order.

    Raises:
        MissingArgumentError: If text is None
    """
    if text is None:
        raise MissingArgumentError("text")

    # Filter before upper() so non-ASCII case mappings never reach A-Z
    counts = Counter(ch.upper() for ch in text if ch in ascii_letters)

    return [
        LetterOccurrence(letter=letter, number_of_occurrences=counts[letter])
        for letter in ascii_uppercase
        if counts[letter] > 0
    ]

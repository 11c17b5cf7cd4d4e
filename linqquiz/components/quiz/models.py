"""
Quiz component - Data models.

Output records, shell input/output models and error types.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

from .ports import FamilyPort

# --- Result Records ---


@dataclass(frozen=True)
class FamilySummary:
    """Statistic entry for a single family."""

    family_id: int
    number_of_family_members: int
    average_age: float


class LetterOccurrence(NamedTuple):
    """Number of occurrences of one letter."""

    letter: str
    number_of_occurrences: int


# --- Input Models ---


@dataclass(frozen=True)
class EvenNumbersInput:
    """Input for listing even numbers."""

    exclusive_upper_limit: int


@dataclass(frozen=True)
class SquaresInput:
    """Input for listing squares divisible by 7."""

    exclusive_upper_limit: int


@dataclass(frozen=True)
class FamilyStatisticInput:
    """Input for summarizing families."""

    families: Iterable[FamilyPort] | None


@dataclass(frozen=True)
class LetterStatisticInput:
    """Input for counting letters."""

    text: str


# --- Output Models ---


@dataclass(frozen=True)
class NumberSequenceOutput:
    """Output from a number sequence operation."""

    numbers: tuple[int, ...]
    total: int


@dataclass(frozen=True)
class FamilyStatisticOutput:
    """Output from family statistic."""

    summaries: tuple[FamilySummary, ...]
    total: int


@dataclass(frozen=True)
class LetterStatisticOutput:
    """Output from letter statistic."""

    occurrences: tuple[LetterOccurrence, ...]
    total: int


# --- Error Types ---


class QuizError(Exception):
    """Base quiz error."""

    pass


class ArgumentOutOfRangeError(QuizError, ValueError):
    """Argument is outside its allowed range."""

    def __init__(self, param: str, value: object, reason: str) -> None:
        self.param = param
        self.value = value
        self.reason = reason
        super().__init__(f"Argument '{param}' out of range ({value!r}): {reason}")


class MissingArgumentError(QuizError, TypeError):
    """Required argument is None."""

    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(f"Argument '{param}' must not be None")


class ArithmeticOverflowError(QuizError, OverflowError):
    """Result does not fit the configured signed integer width."""

    def __init__(self, operation: str, value: int, integer_bits: int) -> None:
        self.operation = operation
        self.value = value
        self.integer_bits = integer_bits
        super().__init__(
            f"Arithmetic overflow: {operation} of {value} exceeds {integer_bits}-bit signed range"
        )

"""
Quiz component - Number sequences, family statistics and letter counts.
"""

from ._impl import (
    DEFAULT_INTEGER_BITS,
    checked_square,
    get_even_numbers,
    get_family_statistic,
    get_letter_statistic,
    get_squares,
    max_signed,
)
from .component import (
    run_even_numbers,
    run_family_statistic,
    run_letter_statistic,
    run_squares,
)
from .models import (
    ArgumentOutOfRangeError,
    ArithmeticOverflowError,
    EvenNumbersInput,
    FamilyStatisticInput,
    FamilyStatisticOutput,
    FamilySummary,
    LetterOccurrence,
    LetterStatisticInput,
    LetterStatisticOutput,
    MissingArgumentError,
    NumberSequenceOutput,
    QuizError,
    SquaresInput,
)
from .ports import FamilyPort, PersonPort

__all__ = [
    # Entry points
    "run_even_numbers",
    "run_squares",
    "run_family_statistic",
    "run_letter_statistic",
    # Functional core
    "get_even_numbers",
    "get_squares",
    "get_family_statistic",
    "get_letter_statistic",
    "checked_square",
    "max_signed",
    "DEFAULT_INTEGER_BITS",
    # Input models
    "EvenNumbersInput",
    "SquaresInput",
    "FamilyStatisticInput",
    "LetterStatisticInput",
    # Output models
    "NumberSequenceOutput",
    "FamilyStatisticOutput",
    "LetterStatisticOutput",
    "FamilySummary",
    "LetterOccurrence",
    # Errors
    "QuizError",
    "ArgumentOutOfRangeError",
    "MissingArgumentError",
    "ArithmeticOverflowError",
    # Ports
    "FamilyPort",
    "PersonPort",
]

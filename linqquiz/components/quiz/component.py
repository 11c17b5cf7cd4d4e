"""
Quiz component - Shell entry points.

Wraps the functional core with input/output models and rules.
Errors from the core propagate unchanged.
"""

from __future__ import annotations

import logging

from linqquiz.rules import QuizRules, default_rules

from ._impl import (
    get_even_numbers,
    get_family_statistic,
    get_letter_statistic,
    get_squares,
)
from .models import (
    EvenNumbersInput,
    FamilyStatisticInput,
    FamilyStatisticOutput,
    LetterStatisticInput,
    LetterStatisticOutput,
    NumberSequenceOutput,
    SquaresInput,
)

logger = logging.getLogger(__name__)


def run_even_numbers(input_data: EvenNumbersInput) -> NumberSequenceOutput:
    """List even numbers below the limit."""
    numbers = get_even_numbers(input_data.exclusive_upper_limit)
    logger.debug(
        "even numbers below %d: %d found", input_data.exclusive_upper_limit, len(numbers)
    )

    return NumberSequenceOutput(numbers=tuple(numbers), total=len(numbers))


def run_squares(
    input_data: SquaresInput,
    rules: QuizRules | None = None,
) -> NumberSequenceOutput:
    """List squares divisible by 7 below the limit, largest first."""
    rules = rules or default_rules()
    numbers = get_squares(
        input_data.exclusive_upper_limit,
        integer_bits=rules.arithmetic.integer_bits,
    )
    logger.debug(
        "squares below %d (%s-bit): %d found",
        input_data.exclusive_upper_limit,
        rules.arithmetic.integer_bits or "unbounded",
        len(numbers),
    )

    return NumberSequenceOutput(numbers=tuple(numbers), total=len(numbers))


def run_family_statistic(input_data: FamilyStatisticInput) -> FamilyStatisticOutput:
    """Summarize each family."""
    summaries = get_family_statistic(input_data.families)
    logger.debug("family statistic: %d families", len(summaries))

    return FamilyStatisticOutput(summaries=tuple(summaries), total=len(summaries))


def run_letter_statistic(input_data: LetterStatisticInput) -> LetterStatisticOutput:
    """Count letters in a text."""
    occurrences = get_letter_statistic(input_data.text)
    logger.debug("letter statistic: %d distinct letters", len(occurrences))

    return LetterStatisticOutput(occurrences=tuple(occurrences), total=len(occurrences))

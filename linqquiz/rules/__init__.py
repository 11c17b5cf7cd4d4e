from linqquiz.rules.loader import default_rules, load_rules
from linqquiz.rules.models import (
    DEFAULT_INTEGER_BITS,
    SUPPORTED_SCHEMA_VERSION,
    ArithmeticRules,
    QuizRules,
)

__all__ = [
    "DEFAULT_INTEGER_BITS",
    "SUPPORTED_SCHEMA_VERSION",
    "ArithmeticRules",
    "QuizRules",
    "default_rules",
    "load_rules",
]

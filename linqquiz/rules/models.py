from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INTEGER_BITS = 32
SUPPORTED_SCHEMA_VERSION = "1.0"


class ArithmeticRules(BaseModel):
    # None means unbounded ints (no overflow check)
    integer_bits: int | None = Field(default=DEFAULT_INTEGER_BITS, ge=8, le=64)


class QuizRules(BaseModel):
    schema_version: str = SUPPORTED_SCHEMA_VERSION
    arithmetic: ArithmeticRules = Field(default_factory=ArithmeticRules)

    model_config = ConfigDict(extra="forbid")

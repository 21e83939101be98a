"""Age domain value and the closed failure taxonomy.

INVARIANT: A ValidatedAge always satisfies ``MIN_AGE <= value <= MAX_AGE``.
ValidationError is a closed union of two variants, discriminated by ``kind``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

MIN_AGE = 0
MAX_AGE = 150


class Bound(StrEnum):
    """Which end of the closed age range was violated."""

    LOWER = "lower"
    UPPER = "upper"


class ValidatedAge(BaseModel):
    """An age inside ``[MIN_AGE, MAX_AGE]``."""

    model_config = {"frozen": True}

    value: int = Field(ge=MIN_AGE, le=MAX_AGE)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


class NotANumber(BaseModel):
    """The raw text is not a well-formed base-10 integer."""

    model_config = {"frozen": True}

    kind: Literal["not_a_number"] = "not_a_number"
    raw: str

    def __str__(self) -> str:
        return f"'{self.raw}' is not a number"


class OutOfRange(BaseModel):
    """The text parsed, but the number falls outside the age range."""

    model_config = {"frozen": True}

    kind: Literal["out_of_range"] = "out_of_range"
    value: int
    bound: Bound

    def __str__(self) -> str:
        if self.bound is Bound.LOWER:
            return f"age can't be negative: {self.value}"
        return f"age too large: {self.value}"


ValidationError = Annotated[NotANumber | OutOfRange, Field(discriminator="kind")]

"""Staged age validation: parse, then range-check.

Each stage returns a Result. The first failing stage ends the pipeline and
its error is returned unchanged, so a range violation is never reported
for text that did not parse.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from typing import Any

from agegate.domain.result import Err, Ok, Result
from agegate.domain.types import (
    MAX_AGE,
    MIN_AGE,
    Bound,
    NotANumber,
    OutOfRange,
    ValidatedAge,
    ValidationError,
)

# ASCII digits only. ``int()`` alone would also accept "1_000", " 7 " and
# non-ASCII digits such as "٤٢".
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Parsed values are signed 64-bit; wider numerals fail to parse, like an
# overflowing fixed-width integer parse.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1
MAX_DIGITS = len(str(INT_MAX))


def parse_int(raw: str, *, trim_whitespace: bool = False) -> Result[int, NotANumber]:
    """Parse *raw* as a signed base-10 integer.

    On failure the error carries *raw* exactly as supplied, even when
    *trim_whitespace* stripped it before matching. Numerals outside
    ``[INT_MIN, INT_MAX]`` are NotANumber; their digits are counted before
    any conversion, so input length is unbounded.
    """
    text = raw.strip() if trim_whitespace else raw
    if INTEGER_PATTERN.fullmatch(text) is None:
        return Err(NotANumber(raw=raw))
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > MAX_DIGITS:
        return Err(NotANumber(raw=raw))
    n = int(digits or "0")
    if text.startswith("-"):
        n = -n
    if not INT_MIN <= n <= INT_MAX:
        return Err(NotANumber(raw=raw))
    return Ok(n)


def check_range(n: int) -> Result[ValidatedAge, OutOfRange]:
    """Accept *n* only when it lies in the closed range ``[MIN_AGE, MAX_AGE]``."""
    if n < MIN_AGE:
        return Err(OutOfRange(value=n, bound=Bound.LOWER))
    if n > MAX_AGE:
        return Err(OutOfRange(value=n, bound=Bound.UPPER))
    return Ok(ValidatedAge(value=n))


def validate(raw: str, *, trim_whitespace: bool = False) -> Result[ValidatedAge, ValidationError]:
    """Validate *raw* as an age.

    Examples:
        >>> validate("25")
        Ok(value=ValidatedAge(value=25))
        >>> validate("abc").unwrap_err()
        NotANumber(kind='not_a_number', raw='abc')
    """
    return parse_int(raw, trim_whitespace=trim_whitespace).and_then(check_range)


def validate_then(
    raw: str,
    *transforms: Callable[[Any], Result[Any, Any]],
    trim_whitespace: bool = False,
) -> Result[Any, Any]:
    """Validate *raw*, then feed the age through each fallible transform in order.

    A transform runs only if every stage before it succeeded.
    """
    return reduce(
        lambda acc, fn: acc.and_then(fn),
        transforms,
        validate(raw, trim_whitespace=trim_whitespace),
    )


def validate_all(
    inputs: Iterable[str], *, trim_whitespace: bool = False
) -> Iterator[tuple[str, Result[ValidatedAge, ValidationError]]]:
    """Lazily validate each input independently, in order.

    Consumers that want to stop at the first failure simply stop iterating.
    """
    for raw in inputs:
        yield raw, validate(raw, trim_whitespace=trim_whitespace)


def multiply(a: str, b: str) -> Result[int, NotANumber]:
    """Multiply two integer strings, stopping at the first that fails to parse."""
    x = parse_int(a)
    if isinstance(x, Err):
        return x
    y = parse_int(b)
    if isinstance(y, Err):
        return y
    return Ok(x.value * y.value)

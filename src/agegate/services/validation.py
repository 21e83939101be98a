"""ValidationService — runs the age validator and reports ServiceResults.

The domain validator is pure and silent; this layer owns logging and the
translation of typed failures into ``ServiceError`` codes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from agegate.domain.result import Err, Result
from agegate.domain.types import NotANumber, OutOfRange, ValidatedAge, ValidationError
from agegate.domain.validation import multiply, validate, validate_all
from agegate.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

DEMO_INPUTS: tuple[str, ...] = ("25", "abc", "-5", "200")


def error_code(error: ValidationError) -> str:
    """Map a validation failure to its stable ServiceError code."""
    if isinstance(error, NotANumber):
        return "NOT_A_NUMBER"
    if isinstance(error, OutOfRange):
        return "OUT_OF_RANGE"
    raise TypeError(f"unknown validation error: {error!r}")


def error_detail(error: ValidationError) -> dict[str, Any]:
    """Payload for a failure: the raw text, or the parsed value and bound."""
    if isinstance(error, NotANumber):
        return {"raw": error.raw}
    if isinstance(error, OutOfRange):
        return {"value": error.value, "bound": str(error.bound)}
    raise TypeError(f"unknown validation error: {error!r}")


def to_service_error(error: ValidationError) -> ServiceError:
    return ServiceError(code=error_code(error), message=str(error), detail=error_detail(error))


def _item(raw: str, result: Result[ValidatedAge, ValidationError]) -> dict[str, Any]:
    if isinstance(result, Err):
        err = result.error
        return {
            "input": raw,
            "ok": False,
            "code": error_code(err),
            "message": str(err),
            "detail": error_detail(err),
        }
    return {"input": raw, "ok": True, "age": result.value.value}


class ValidationService:
    """Age validation operations for the CLI.

    Args:
        trim_whitespace: Strip surrounding whitespace before parsing.
        fail_fast: Stop a batch at its first failing input.
    """

    def __init__(self, *, trim_whitespace: bool = False, fail_fast: bool = False) -> None:
        self._trim = trim_whitespace
        self._fail_fast = fail_fast

    def check(self, raw: str) -> ServiceResult:
        """Validate a single input."""
        result = validate(raw, trim_whitespace=self._trim)
        if isinstance(result, Err):
            logger.debug("Rejected %r: %s", raw, result.error)
            return ServiceResult.failure("check", to_service_error(result.error))
        logger.debug("Accepted %r as %d", raw, result.value.value)
        return ServiceResult.success("check", {"input": raw, "age": result.value.value})

    def validate_many(self, inputs: Iterable[str], *, op: str = "validate") -> ServiceResult:
        """Validate every input independently and summarise the batch.

        A failure never affects later inputs unless ``fail_fast`` is set,
        in which case the batch stops after the first failure and the
        unprocessed inputs are reported as skipped.
        """
        pending = list(inputs)
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        skipped = 0

        for index, (raw, result) in enumerate(validate_all(pending, trim_whitespace=self._trim)):
            items.append(_item(raw, result))
            if result.is_err() and self._fail_fast:
                skipped = len(pending) - index - 1
                if skipped:
                    warnings.append(f"Stopped at first failure; {skipped} input(s) skipped")
                break

        invalid = sum(1 for item in items if not item["ok"])
        data = {
            "items": items,
            "count": len(items),
            "valid_count": len(items) - invalid,
            "invalid_count": invalid,
        }
        meta = {
            "submitted": len(pending),
            "skipped": skipped,
            "fail_fast": self._fail_fast,
            "trim_whitespace": self._trim,
        }
        logger.debug("Batch %s: %d valid, %d invalid", op, len(items) - invalid, invalid)

        if invalid:
            error = ServiceError(
                code="INVALID_INPUT",
                message=f"{invalid} of {len(items)} input(s) failed validation",
                detail={"count": len(items), "invalid_count": invalid},
            )
            return ServiceResult.failure(op, error, data=data, warnings=warnings, meta=meta)
        return ServiceResult.success(op, data, warnings=warnings, meta=meta)

    def demo(self) -> ServiceResult:
        """Run the reference scenario; reported as success whatever the outcomes."""
        batch = ValidationService(trim_whitespace=self._trim).validate_many(DEMO_INPUTS, op="demo")
        return ServiceResult.success("demo", batch.data, meta=batch.meta)

    def multiply(self, a: str, b: str) -> ServiceResult:
        """Multiply two integer strings."""
        result = multiply(a, b)
        if isinstance(result, Err):
            logger.debug("Multiply rejected operand %r", result.error.raw)
            return ServiceResult.failure("multiply", to_service_error(result.error))
        return ServiceResult.success("multiply", {"a": a, "b": b, "product": result.value})

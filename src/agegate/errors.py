"""Exception hierarchy for agegate.

Validation failures are values, not exceptions. These types cover
misuse and environment problems only.
"""

from __future__ import annotations

from pathlib import Path


class AgegateError(Exception):
    """Base exception for this project."""


class ConfigError(AgegateError):
    """Raised when a config file cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path

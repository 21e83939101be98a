"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, agegate.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    trim_whitespace: bool = False


class BatchConfig(BaseModel):
    """[batch] section."""

    model_config = {"frozen": True}

    fail_fast: bool = False


"""Shared pytest fixtures for agegate tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run in an empty temp directory with no config env override.

    Keeps a developer's own agegate.toml or AGEGATE_* variables out of tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AGEGATE_CONFIG", raising=False)
    for var in ("AGEGATE_JSON_OUTPUT", "AGEGATE_QUIET", "AGEGATE_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    app_level = logging.getLogger("agegate").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("agegate").setLevel(app_level)

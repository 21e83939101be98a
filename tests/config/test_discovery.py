"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from agegate.config.discovery import CONFIG_FILENAME, find_config, read_toml
from agegate.errors import ConfigError


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AGEGATE_CONFIG", raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        monkeypatch.setenv("AGEGATE_CONFIG", str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGEGATE_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestReadToml:
    def test_returns_tables(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[batch]\nfail_fast = true\n")
        assert read_toml(path) == {"batch": {"fail_fast": True}}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("")
        assert read_toml(path) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[batch\n")
        with pytest.raises(ConfigError) as exc_info:
            read_toml(path)
        assert exc_info.value.path == path
        assert "Invalid TOML" in str(exc_info.value)

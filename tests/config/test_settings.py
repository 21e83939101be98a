"""Tests for AgegateSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from agegate.config.settings import AgegateSettings
from agegate.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AGEGATE_CONFIG", raising=False)
    monkeypatch.delenv("AGEGATE_PARSE__TRIM_WHITESPACE", raising=False)
    monkeypatch.delenv("AGEGATE_BATCH__FAIL_FAST", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AgegateSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.parse.trim_whitespace is False
        assert settings.batch.fail_fast is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AgegateSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agegate.toml").write_text("[parse]\ntrim_whitespace = true\n")
        settings = AgegateSettings.from_cli(start=tmp_path)
        assert settings.parse.trim_whitespace is True
        assert settings.batch.fail_fast is False
        assert settings.config_path == (tmp_path / "agegate.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[batch]\nfail_fast = true\n")
        settings = AgegateSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.batch.fail_fast is True
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = AgegateSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.batch.fail_fast is False

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "agegate.toml").write_text("not = [valid")
        with pytest.raises(ConfigError):
            AgegateSettings.from_cli(start=tmp_path)

    def test_wrongly_typed_value_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "agegate.toml"
        path.write_text("[batch]\nfail_fast = 3.5\n")
        with pytest.raises(ConfigError) as exc_info:
            AgegateSettings.from_cli(start=tmp_path)
        assert exc_info.value.path == path.resolve()
        assert "batch.fail_fast" in str(exc_info.value)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "agegate.toml").write_text("[batch]\nfail_fast = false\n")
        monkeypatch.setenv("AGEGATE_BATCH__FAIL_FAST", "true")
        settings = AgegateSettings.from_cli(start=tmp_path)
        assert settings.batch.fail_fast is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agegate.toml").write_text("quiet = true\n")
        settings = AgegateSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False

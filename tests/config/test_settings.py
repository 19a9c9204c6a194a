"""Tests for AgeSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from agecalc.config.models import ThemeConfig
from agecalc.config.settings import AgeSettings
from agecalc.domain.types import Theme


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AGECALC_CONFIG", raising=False)


class TestAgeSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.no_interact is False
        assert settings.clock.timezone == "America/Sao_Paulo"
        assert settings.clock.label == "Horário de Brasília"
        assert settings.clock.refresh_seconds == 60.0
        assert settings.form.min_year == 1900
        assert settings.theme.default is Theme.LIGHT
        assert settings.theme.state_dir == Path.home() / ".agecalc"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text(
            '[clock]\ntimezone = "America/New_York"\nlabel = "NY"\n[form]\nmin_year = 1800\n',
            encoding="utf-8",
        )
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        assert settings.clock.timezone == "America/New_York"
        assert settings.clock.label == "NY"
        assert settings.form.min_year == 1800
        assert settings.clock.refresh_seconds == 60.0  # default preserved
        assert settings.config_path == tmp_path / "agecalc.toml"

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[form]\nmin_year = 1850\n", encoding="utf-8")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = AgeSettings.from_cli(start_dir=child)
        assert settings.form.min_year == 1850

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("", encoding="utf-8")
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        assert settings.form.min_year == 1900

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[theme]\ndefault = "dark"\n', encoding="utf-8")
        settings = AgeSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.theme.default is Theme.DARK
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[form]\nmin_year = 1850\n", encoding="utf-8")
        settings = AgeSettings.from_cli(
            config_path=str(tmp_path / "nope.toml"), start_dir=tmp_path
        )
        assert settings.config_path is None
        assert settings.form.min_year == 1900

    def test_invalid_toml_raises_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[clock\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AgeSettings.from_cli(start_dir=tmp_path)

    def test_state_dir_expands_home(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text(
            '[theme]\nstate_dir = "~/somewhere"\n', encoding="utf-8"
        )
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        assert settings.theme.state_dir == Path.home() / "somewhere"

    def test_non_positive_refresh_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "agecalc.toml").write_text("[clock]\nrefresh_seconds = 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            AgeSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "agecalc.toml").write_text("[form]\nmin_year = 1850\n", encoding="utf-8")
        monkeypatch.setenv("AGECALC_FORM__MIN_YEAR", "1950")
        settings = AgeSettings.from_cli(start_dir=tmp_path)
        assert settings.form.min_year == 1950

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = AgeSettings.from_cli(
            start_dir=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            no_interact=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.no_interact is True

    def test_init_section_overrides_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AGECALC_THEME__STATE_DIR", str(tmp_path / "env"))
        settings = AgeSettings.from_cli(
            start_dir=tmp_path, theme=ThemeConfig(state_dir=tmp_path / "init")
        )
        assert settings.theme.state_dir == tmp_path / "init"

"""Shared pytest fixtures for agecalc tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from agecalc.config.models import ThemeConfig
from agecalc.config.settings import AgeSettings
from agecalc.infrastructure.runtime import Runtime
from agecalc.services.form import FormService

from tests.helpers import FIXED_NOW


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    """Directory holding the preferences file."""
    return tmp_path / "state"


@pytest.fixture
def settings(tmp_path: Path, state_dir: Path, monkeypatch: pytest.MonkeyPatch) -> AgeSettings:
    """Default settings isolated from the user's config and preferences."""
    monkeypatch.delenv("AGECALC_CONFIG", raising=False)
    return AgeSettings.from_cli(start_dir=tmp_path, theme=ThemeConfig(state_dir=state_dir))


@pytest.fixture
def runtime(settings: AgeSettings) -> Generator[Runtime]:
    """Runtime whose clock is frozen at :data:`FIXED_NOW`."""
    rt = Runtime(settings, now=lambda: FIXED_NOW)
    try:
        yield rt
    finally:
        rt.close()


@pytest.fixture
def form(runtime: Runtime) -> FormService:
    """A fresh form session at :data:`FIXED_NOW`."""
    return FormService(runtime)


@pytest.fixture
def _isolated_cli(
    tmp_path: Path,
    state_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Run CLI commands in a temp dir with a frozen clock.

    Use via ``@pytest.mark.usefixtures("_isolated_cli")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AGECALC_CONFIG", raising=False)
    monkeypatch.setenv("AGECALC_THEME__STATE_DIR", str(state_dir))
    monkeypatch.setattr("agecalc.infrastructure.clock._utc_now", lambda: FIXED_NOW)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root handler that every CLI invocation installs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("agecalc")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)

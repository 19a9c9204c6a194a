"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, agecalc.toml only contains
overrides. An empty (or absent) file is a complete configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from agecalc.domain.types import Theme

# --- agecalc.toml sections ---


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    timezone: str = "America/Sao_Paulo"
    label: str = "Horário de Brasília"
    refresh_seconds: float = 60.0

    @field_validator("refresh_seconds")
    @classmethod
    def _positive_interval(cls, value: float) -> float:
        if value <= 0:
            msg = "refresh_seconds must be positive"
            raise ValueError(msg)
        return value


class FormConfig(BaseModel):
    """[form] section."""

    model_config = {"frozen": True}

    min_year: int = 1900


class ThemeConfig(BaseModel):
    """[theme] section."""

    model_config = {"frozen": True}

    state_dir: Path = Field(default_factory=lambda: Path.home() / ".agecalc")
    default: Theme = Theme.LIGHT

    @field_validator("state_dir")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()


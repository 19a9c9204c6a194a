"""ServiceResult and ServiceError — the contract between services and front ends.

INVARIANT: Every public service operation returns a ServiceResult.
Front ends (CLI commands, the interactive form) only ever consume this
type and never inspect service internals.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes carried in :class:`ServiceError`."""

    INVALID_FIELDS = "INVALID_FIELDS"
    INVALID_DATE = "INVALID_DATE"
    FUTURE_DATE = "FUTURE_DATE"
    INVALID_THEME = "INVALID_THEME"


class ServiceError(BaseModel):
    """Structured failure payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"submit"``, ``"theme_toggle"``).
        data: Operation payload. Failed submits still carry the form
            snapshot so front ends can show field errors next to inputs.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

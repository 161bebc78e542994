"""The result contract returned by every service operation.

The CLI renders a :class:`ServiceResult` and maps ``ok=False`` to exit
code 1.  An embedding application can inspect the same object directly.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Values of :attr:`ServiceError.code`."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNKNOWN_RULE = "UNKNOWN_RULE"
    INVALID_TAG = "INVALID_TAG"
    SIBLING_NOT_FOUND = "SIBLING_NOT_FOUND"
    INVALID_RECORD = "INVALID_RECORD"
    INVALID_JSON = "INVALID_JSON"
    INVALID_RULES = "INVALID_RULES"


class ServiceError(BaseModel):
    """Why an operation did not succeed.

    For ``VALIDATION_FAILED`` the message is the report summary and
    ``detail["errors"]`` holds one dumped ``FieldError`` per failing field.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when the input broke its rules or could not be read.
        op: Operation name, e.g. ``"check_value"``; selects the renderer.
        data: Operation payload on success.
        warnings: Problems worth reporting that did not fail the operation.
        error: Set when ``ok`` is False.
        meta: Context for ``--verbose`` output, such as the config file used.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

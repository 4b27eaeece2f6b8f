"""Tickline error hierarchy."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCategory(StrEnum):
    """Category of error for classification and handling."""

    INPUT = "input"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class TicklineError(Exception):
    """Base error for all tickline exceptions."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.details: dict[str, Any] = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, category={self.category!r})"


class InvalidAxisQueryError(TicklineError):
    """Axis inputs violate the caller contract (bad range, count or budget)."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, category=ErrorCategory.INPUT, details=details)


class ConfigurationError(TicklineError):
    """Invalid configuration value."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            details={"key": key} if key else None,
        )
        self.key = key

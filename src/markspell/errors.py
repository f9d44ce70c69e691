"""Standardized error types raised by the spellcheck pipeline.

Every error carries a machine-readable ``error_code`` and serializes to a
JSON-friendly mapping via :meth:`SpellcheckError.to_dict`. Failures raised by
a detector while checking text are never wrapped; they reach the caller
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ErrorCode:
    """Constants for error codes."""

    INVALID_ARGUMENT = "invalid_argument"
    DETECTOR_UNAVAILABLE = "detector_unavailable"


@dataclass
class SpellcheckError(Exception):
    """Base exception class for markspell errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


@dataclass
class InvalidArgumentError(SpellcheckError, TypeError):
    """Raised synchronously when a public entry point receives a bad argument."""

    error_code: str = field(default=ErrorCode.INVALID_ARGUMENT)
    message: str = field(default="Invalid argument")
    details: dict[str, Any] = field(default_factory=dict)

    argument: str | None = field(default=None)
    received: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.argument is not None:
            result["argument"] = self.argument
        if self.received is not None:
            result["received"] = self.received
        return result

    @classmethod
    def expected_str(cls, argument: str, value: Any) -> InvalidArgumentError:
        received = type(value).__name__
        return cls(
            message=f"{argument} must be a string, got {received}",
            argument=argument,
            received=received,
        )


@dataclass
class DetectorUnavailableError(SpellcheckError):
    """Raised when the default dictionary-backed detector cannot be built."""

    error_code: str = field(default=ErrorCode.DETECTOR_UNAVAILABLE)
    message: str = field(default="No spelling detector is available")
    details: dict[str, Any] = field(default_factory=dict)

    language: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.language is not None:
            result["language"] = self.language
        return result


__all__ = [
    "ErrorCode",
    "SpellcheckError",
    "InvalidArgumentError",
    "DetectorUnavailableError",
]

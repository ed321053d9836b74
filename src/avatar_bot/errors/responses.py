"""Error payloads and exception types for the avatar bot.

Exceptions carry an ``ErrorCode`` plus a details dict, and convert to
an ``ErrorResponse`` for JSON logs and CLI output.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from avatar_bot.errors.codes import ErrorCode


@dataclass
class ErrorResponse:
    """Serializable error payload.

    Attributes:
        code: Error category.
        message: Human-readable message.
        details: Extra context, e.g. the offending parameter.
        retryable: Derived from ``code``.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None
    retryable: bool = field(init=False)

    def __post_init__(self) -> None:
        self.retryable = self.code.is_retryable()

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain dict; ``details`` only when present."""
        payload: dict[str, Any] = {
            "error": True,
            "code": self.code.value,
            "message": self.message,
            "retryable": self.retryable,
        }
        if self.details:
            payload["details"] = self.details
        return payload

    @classmethod
    def from_exception(cls, exc: Exception, code: ErrorCode | None = None) -> "ErrorResponse":
        """Wrap any exception. Bot errors keep their own code and details."""
        if isinstance(exc, BotError):
            return exc.to_response()
        return cls(
            code=code or ErrorCode.INTERNAL_ERROR,
            message=str(exc),
            details={"exception_type": type(exc).__name__},
        )


class BotError(Exception):
    """Base class for errors raised by the bot, its host and its config."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(code=self.code, message=str(self), details=self.details)


class ParameterError(BotError):
    """A caller passed a bad value (bot number, timer delay, frame delta).

    Args:
        param_name: Name of the offending parameter.
        message: What was wrong with it.
        value: The rejected value, recorded as a string.
        code: ``INVALID_PARAMETER`` or ``OUT_OF_RANGE``.
    """

    def __init__(
        self,
        param_name: str,
        message: str,
        value: Any = None,
        code: ErrorCode = ErrorCode.INVALID_PARAMETER,
    ) -> None:
        details: dict[str, Any] = {"parameter": param_name}
        if value is not None:
            details["provided_value"] = str(value)
        super().__init__(code=code, message=message, details=details)


class HostError(BotError):
    """The scripting host can't serve a request, or the bot isn't started."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.HOST_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, message=message, details=details)


class ConfigurationError(BotError):
    """A config file is missing, malformed or fails validation."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            details={"path": str(path)},
        )
        self.path = path

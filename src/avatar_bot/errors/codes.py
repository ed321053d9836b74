"""Structured error codes for the avatar bot."""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes.

    Error codes are grouped by category:
    - INVALID_* / OUT_OF_*: Parameter validation errors
    - HOST_* / NOT_STARTED: Scripting host errors
    - CONFIGURATION_* / INTERNAL_*: System-level errors
    """

    # Parameter validation errors
    INVALID_PARAMETER = "INVALID_PARAMETER"
    """A parameter value is invalid (wrong type, format, or value)."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    """A numeric parameter is outside allowed bounds."""

    # Host errors
    HOST_UNAVAILABLE = "HOST_UNAVAILABLE"
    """A host collaborator (embodiment, viewer, audio) is missing or gone."""

    NOT_STARTED = "NOT_STARTED"
    """The bot script was used before start()."""

    # System errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """Invalid or unreadable configuration."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """Unexpected internal error (bug or system issue)."""

    def is_retryable(self) -> bool:
        """Check if this error type is potentially retryable.

        Returns:
            True if the error might succeed on retry.
        """
        return self is ErrorCode.HOST_UNAVAILABLE

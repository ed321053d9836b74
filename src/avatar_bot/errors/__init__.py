"""Structured error handling for the avatar bot.

Consistent error codes and response formats for configuration,
host and parameter failures.
"""

from avatar_bot.errors.codes import ErrorCode
from avatar_bot.errors.responses import (
    BotError,
    ConfigurationError,
    ErrorResponse,
    HostError,
    ParameterError,
)

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "BotError",
    "ConfigurationError",
    "HostError",
    "ParameterError",
]

"""Error types shared by the formatters.

Every error carries two messages: the exception text is meant for logs and
developers, `user_message` is safe to show in a UI or on the command line.
"""

from __future__ import annotations


class AppError(Exception):
    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class InvalidArgumentError(AppError, ValueError):
    """Input value can't be formatted (bad type, bad text, zero total...)."""


class PreconditionViolationError(AppError, ValueError):
    """Caller broke a contract (negative precision, unsorted unit table...)."""


class ConfigError(AppError):
    pass

"""Domain error types."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Caller-facing classification of a failed chat request."""

    RATE_LIMITED = 'rate_limited'
    AUTH_FAILURE = 'auth_failure'
    BAD_REQUEST = 'bad_request'
    UNKNOWN = 'unknown'


class ConversationValidationError(ValueError):
    """Raised when the caller-supplied conversation cannot be normalized."""

    def __init__(self, code: str, message: str, *, index: int | None = None, raw: object = None) -> None:
        super().__init__(message)
        self.code = code
        self.index = index
        self.raw = raw


class InputShapeError(ConversationValidationError):
    """The ``messages`` value is missing or is not a list."""

    def __init__(self) -> None:
        super().__init__('missing-field', 'Messages array is required')


class MessageFieldError(ConversationValidationError):
    """A message lacks a usable role or content."""

    def __init__(self, index: int) -> None:
        super().__init__('missing-field', f'Message at index {index} missing role or content', index=index)


class InvalidRoleError(ConversationValidationError):
    def __init__(self, index: int, raw: object) -> None:
        super().__init__(
            'invalid-role',
            f'Invalid role "{raw}" at index {index}. Must be "user", "assistant", or "system"',
            index=index,
            raw=raw,
        )


class CompletionError(Exception):
    """Base for failures of the remote completion call."""


class ProviderError(CompletionError):
    """The completion provider answered with an error status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class EmptyCompletionError(CompletionError):
    """The provider returned no usable choice."""

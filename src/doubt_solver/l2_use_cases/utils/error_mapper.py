"""Classify pipeline failures into the caller-facing error taxonomy."""

from __future__ import annotations

from doubt_solver.l1_entities.errors import ConversationValidationError, ErrorKind, ProviderError

_STATUS_KINDS: dict[int, ErrorKind] = {
    429: ErrorKind.RATE_LIMITED,
    401: ErrorKind.AUTH_FAILURE,
    400: ErrorKind.BAD_REQUEST,
}


def error_status(exc: BaseException) -> int | None:
    """Best-effort HTTP status carried by *exc*, if any."""
    if isinstance(exc, ProviderError):
        return exc.status
    for attr in ('status', 'status_code'):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def classify_error(exc: BaseException) -> ErrorKind:
    """Map *exc* to an ErrorKind.

    Conversation validation failures are client errors and classify as
    BAD_REQUEST. Everything without a recognised status is UNKNOWN.
    """
    if isinstance(exc, ConversationValidationError):
        return ErrorKind.BAD_REQUEST
    status = error_status(exc)
    if status is None:
        return ErrorKind.UNKNOWN
    return _STATUS_KINDS.get(status, ErrorKind.UNKNOWN)

"""Pure functions for validating and canonicalizing a caller-supplied conversation."""

from __future__ import annotations

from collections.abc import Mapping

from doubt_solver.l1_entities.chat_message import CANONICAL_ROLES, ROLE_SYNONYMS, ChatMessage
from doubt_solver.l1_entities.errors import InputShapeError, InvalidRoleError, MessageFieldError


def canonical_role(raw_role: str) -> str | None:
    """Map a raw role token to its canonical value, or None if it has none."""
    role = raw_role.lower()
    role = ROLE_SYNONYMS.get(role, role)
    return role if role in CANONICAL_ROLES else None


def normalize_messages(raw: object) -> list[ChatMessage]:
    """Validate *raw* and return canonical messages in the original order.

    Content is kept verbatim. Caller-supplied ``system`` turns are accepted
    like any other canonical role.

    Raises InputShapeError when *raw* is not a list, MessageFieldError when an
    element lacks a non-empty string role or content, and InvalidRoleError when
    a role token has no canonical value.
    """
    if not isinstance(raw, list):
        raise InputShapeError()

    normalized: list[ChatMessage] = []
    for index, item in enumerate(raw):
        if isinstance(item, ChatMessage):
            item = item.model_dump()
        if not isinstance(item, Mapping):
            raise MessageFieldError(index)
        raw_role = item.get('role')
        content = item.get('content')
        if not isinstance(raw_role, str) or not raw_role or not isinstance(content, str) or not content:
            raise MessageFieldError(index)

        role = canonical_role(raw_role)
        if role is None:
            raise InvalidRoleError(index, raw_role)
        normalized.append(ChatMessage(role=role, content=content))  # ty: ignore[invalid-argument-type] -- membership checked above
    return normalized

"""Chat message entity and the role vocabulary it accepts."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

Role = Literal['system', 'user', 'assistant']

CANONICAL_ROLES: frozenset[str] = frozenset(get_args(Role))

# Raw tokens (lower-cased) that some clients send for the assistant turn.
ROLE_SYNONYMS: dict[str, str] = {
    'model': 'assistant',
    'bot': 'assistant',
    'ai': 'assistant',
}


class ChatMessage(BaseModel):
    """A single message in an LLM conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = Field(min_length=1)

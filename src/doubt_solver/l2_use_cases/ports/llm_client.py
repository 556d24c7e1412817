"""Port: LLM chat client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.generation import GenerationParams


@dataclass(frozen=True)
class ChatResponse:
    """Response from an LLM chat call."""

    content: str | None
    prompt_tokens: int = 0


class LLMClient(Protocol):
    """Abstract LLM client. Zero framework types leak through.

    Implementations raise ``ProviderError`` for status failures and
    ``EmptyCompletionError`` when the provider returns no choice.
    """

    async def chat(self, model: str, messages: list[ChatMessage], params: GenerationParams) -> ChatResponse:
        """Multi-turn chat. Returns the first choice."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...

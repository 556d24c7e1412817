"""Use case: send an assembled prompt to the completion provider."""

from __future__ import annotations

import json
import logging

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.errors import EmptyCompletionError
from doubt_solver.l1_entities.generation import TUTOR_GENERATION_PARAMS
from doubt_solver.l2_use_cases.ports.llm_client import LLMClient

log = logging.getLogger('dsv.llm')


class CompletionDispatcher:
    """Issues exactly one chat call per prompt with the fixed tutor generation parameters."""

    def __init__(self, llm_client: LLMClient, model: str) -> None:
        self._llm = llm_client
        self._model = model

    async def dispatch(self, messages: list[ChatMessage]) -> str:
        """Return the text of the first reply. Raises on provider failure or missing content."""
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                'Sending messages to %s: %s',
                self._model,
                json.dumps([m.model_dump() for m in messages], indent=2, ensure_ascii=False),
            )

        resp = await self._llm.chat(model=self._model, messages=messages, params=TUTOR_GENERATION_PARAMS)
        if resp.content is None:
            raise EmptyCompletionError('Completion provider returned no message content')

        log.info('Completion received (%d chars, prompt_tokens=%d)', len(resp.content), resp.prompt_tokens)
        return resp.content

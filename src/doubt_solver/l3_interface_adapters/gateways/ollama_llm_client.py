"""Gateway: Ollama LLM client; implements LLMClient port."""

from __future__ import annotations

import ollama as ollama_sync

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.errors import ProviderError
from doubt_solver.l1_entities.generation import GenerationParams
from doubt_solver.l2_use_cases.ports.llm_client import ChatResponse


class OllamaLLMClient:
    """Wraps ollama.AsyncClient to implement the LLMClient protocol."""

    def __init__(self, host: str = 'http://localhost:11434') -> None:
        self._host = host
        self._client: ollama_sync.AsyncClient | None = None

    def _async_client(self) -> ollama_sync.AsyncClient:
        if self._client is None:
            self._client = ollama_sync.AsyncClient(host=self._host)
        return self._client

    async def chat(self, model: str, messages: list[ChatMessage], params: GenerationParams) -> ChatResponse:
        try:
            resp = await self._async_client().chat(
                model=model,
                messages=[m.model_dump() for m in messages],
                stream=False,
                options={
                    'num_predict': params.max_tokens,
                    'temperature': params.temperature,
                    'top_p': params.top_p,
                },
            )
        except ollama_sync.ResponseError as e:
            raise ProviderError(e.error, status=e.status_code) from e
        return ChatResponse(
            content=resp.message.content,
            prompt_tokens=getattr(resp, 'prompt_eval_count', 0) or 0,
        )

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = ollama_sync.Client(host=self._host)
            client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'

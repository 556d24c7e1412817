"""Gateway: OpenAI-compatible LLM client; implements LLMClient port.

Works with any OpenAI-compatible API: Groq, OpenAI, Gemini, Together, vLLM, etc.
"""

from __future__ import annotations

import openai

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.errors import EmptyCompletionError, ProviderError
from doubt_solver.l1_entities.generation import GenerationParams
from doubt_solver.l2_use_cases.ports.llm_client import ChatResponse

GROQ_BASE_URL = 'https://api.groq.com/openai/v1'


class OpenAICompatLLMClient:
    """Wraps openai.AsyncOpenAI to implement the LLMClient protocol.

    The async client is created on first use and reused for the lifetime of
    this gateway.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = GROQ_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: openai.AsyncOpenAI | None = None

    def _client_kwargs(self) -> dict:
        kwargs: dict = {'api_key': self._api_key, 'base_url': self._base_url}
        if self._timeout is not None:
            kwargs['timeout'] = self._timeout
        return kwargs

    def _async_client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            self._client = openai.AsyncOpenAI(**self._client_kwargs())
        return self._client

    async def chat(self, model: str, messages: list[ChatMessage], params: GenerationParams) -> ChatResponse:
        try:
            resp = await self._async_client().chat.completions.create(
                model=model,
                messages=[{'role': m.role, 'content': m.content} for m in messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                max_tokens=params.max_tokens,
                temperature=params.temperature,
                top_p=params.top_p,
                stream=params.stream,
            )
        except openai.APIStatusError as e:
            raise ProviderError(e.message, status=e.status_code) from e

        if not resp.choices:
            raise EmptyCompletionError('Completion provider returned no choices')
        content = resp.choices[0].message.content
        prompt_tokens = resp.usage.prompt_tokens if resp.usage else 0
        return ChatResponse(content=content, prompt_tokens=prompt_tokens)

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = openai.OpenAI(**self._client_kwargs())
            client.models.list()
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'

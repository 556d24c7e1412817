"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.config import AppConfig
from doubt_solver.l1_entities.generation import GenerationParams
from doubt_solver.l1_entities.problem_context import ProblemContext
from doubt_solver.l1_entities.template import TutorTemplate
from doubt_solver.l2_use_cases.ports.llm_client import ChatResponse
from doubt_solver.l3_interface_adapters.gateways.yaml_template_loader import YamlTemplateLoader
from doubt_solver.l4_frameworks_and_drivers.infra_config import APP_CONFIG_DEFAULTS

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for use case and controller tests."""

    def __init__(self, response: str | None = 'Fake LLM response', prompt_tokens: int = 100):
        self._response = response
        self._prompt_tokens = prompt_tokens
        self._error: BaseException | None = None
        self.chat_calls: list[tuple[str, list[ChatMessage], GenerationParams]] = []
        self._connectivity = (True, '')

    async def chat(self, model: str, messages: list[ChatMessage], params: GenerationParams) -> ChatResponse:
        self.chat_calls.append((model, list(messages), params))
        if self._error is not None:
            raise self._error
        return ChatResponse(content=self._response, prompt_tokens=self._prompt_tokens)

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def set_response(self, response: str | None, prompt_tokens: int = 100) -> None:
        self._response = response
        self._prompt_tokens = prompt_tokens

    def set_error(self, error: BaseException) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)


class StatusError(Exception):
    """Foreign provider exception carrying a ``status`` attribute, like JS SDK errors."""

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig.model_validate(APP_CONFIG_DEFAULTS)


@pytest.fixture
def tutor_template() -> TutorTemplate:
    return YamlTemplateLoader().load('dsa_tutor')


@pytest.fixture
def two_sum() -> ProblemContext:
    return ProblemContext(
        title='Two Sum',
        description='Return indices of the two numbers that add up to target.',
        testCases='nums=[2,7,11,15], target=9 -> [0,1]',
        startCode='def two_sum(nums, target):\n    pass\n',
    )


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
completion:
  model: "llama-3.1-8b-instant"
template: "dsa_tutor"
server:
  host: "0.0.0.0"
  port: 9000
  environment: "development"
logging:
  level: "DEBUG"
llm_provider: "openai"
openai:
  api_key_env: "MY_GROQ_KEY"
  timeout: 30
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()

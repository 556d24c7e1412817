"""Dependency container; composition root for wiring all layers together."""

from __future__ import annotations

from doubt_solver.l1_entities.config import AppConfig
from doubt_solver.l1_entities.template import TutorTemplate
from doubt_solver.l2_use_cases.ports.llm_client import LLMClient
from doubt_solver.l2_use_cases.solve_doubt_use_case import SolveDoubtUseCase
from doubt_solver.l3_interface_adapters.controllers.chat_controller import ChatController
from doubt_solver.l3_interface_adapters.gateways.ollama_llm_client import OllamaLLMClient
from doubt_solver.l3_interface_adapters.gateways.openai_llm_client import OpenAICompatLLMClient
from doubt_solver.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances once per process. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        template: TutorTemplate,
        infra: InfraConfig | None = None,
        llm_client: LLMClient | None = None,
    ) -> None:
        self.config = config
        self.template = template

        _infra = infra or InfraConfig()
        self.llm_client: LLMClient = llm_client or self._build_llm_client(_infra)
        self.use_case = SolveDoubtUseCase(
            llm_client=self.llm_client,
            model=config.completion.model,
            template=template,
        )
        self.controller = ChatController(self.use_case, expose_errors=not config.server.is_production)

    @staticmethod
    def _build_llm_client(infra: InfraConfig) -> LLMClient:
        if infra.llm_provider == 'openai':
            return OpenAICompatLLMClient(
                api_key=infra.openai.resolve_api_key(),
                base_url=infra.openai.base_url,
                timeout=infra.openai.timeout,
            )
        if infra.llm_provider == 'ollama':
            return OllamaLLMClient(host=infra.ollama.host)
        raise ValueError(f"Unknown llm_provider: '{infra.llm_provider}' (expected 'openai' or 'ollama')")

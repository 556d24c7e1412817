"""Runtime settings: app defaults plus infrastructure provider configs; lives in L4, not domain."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pydantic import BaseModel, Field

from doubt_solver.l1_entities.config import AppConfig
from doubt_solver.l3_interface_adapters.gateways.openai_llm_client import GROQ_BASE_URL
from doubt_solver.l3_interface_adapters.gateways.yaml_config_loader import load_layered_settings

APP_CONFIG_DEFAULTS: dict = {
    'completion': {
        'model': 'llama-3.3-70b-versatile',
    },
    'template': 'dsa_tutor',
    'server': {
        'host': '127.0.0.1',
        'port': 8000,
        'environment': 'production',
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
}


class OllamaProviderConfig(BaseModel):
    host: str = 'http://localhost:11434'


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → read from api_key_env
    api_key_env: str = 'GROQ_API_KEY'
    base_url: str = GROQ_BASE_URL
    timeout: float | None = None

    def resolve_api_key(self) -> str | None:
        return self.api_key or os.environ.get(self.api_key_env) or None


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    llm_provider: str = 'openai'  # 'openai' | 'ollama'
    ollama: OllamaProviderConfig = Field(default_factory=OllamaProviderConfig)
    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)


@dataclass(frozen=True)
class Settings:
    app: AppConfig
    infra: InfraConfig


def load_settings(config_path: str | None = None, overrides: dict | None = None) -> Settings:
    """Validate defaults < YAML file < *overrides* into app and provider settings.

    Raises FileNotFoundError for a missing explicit path and ValueError
    (including pydantic's ValidationError) for malformed settings.
    """
    raw = load_layered_settings(APP_CONFIG_DEFAULTS, config_path, overrides)
    return Settings(app=AppConfig.model_validate(raw), infra=InfraConfig.model_validate(raw))

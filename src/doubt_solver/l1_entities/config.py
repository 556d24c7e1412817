"""Configuration Pydantic models; pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class CompletionConfig(BaseModel):
    model: str


class ServerConfig(BaseModel):
    host: str
    port: int
    environment: str  # 'production' hides internal error detail from callers

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == 'production'


class LoggingConfig(BaseModel):
    level: str
    file: str | None = None


class AppConfig(BaseModel):
    completion: CompletionConfig
    template: str
    server: ServerConfig
    logging: LoggingConfig

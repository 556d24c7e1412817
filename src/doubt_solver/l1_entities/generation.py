"""Generation parameters sent with every completion request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationParams:
    max_tokens: int
    temperature: float
    top_p: float
    stream: bool = False


TUTOR_GENERATION_PARAMS = GenerationParams(max_tokens=2048, temperature=0.7, top_p=1.0)

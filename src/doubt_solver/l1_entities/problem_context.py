"""Problem context entity: the coding problem a chat is scoped to."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProblemContext(BaseModel):
    """Snapshot of the current problem, supplied by the caller on every request.

    Missing fields stay ``None``; the prompt builder embeds them as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    test_cases: str | None = Field(default=None, alias='testCases')
    start_code: str | None = Field(default=None, alias='startCode')

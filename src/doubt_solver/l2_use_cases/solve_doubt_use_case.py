"""Use case: answer one tutoring turn for a problem-scoped conversation."""

from __future__ import annotations

from doubt_solver.l1_entities.problem_context import ProblemContext
from doubt_solver.l1_entities.template import TutorTemplate
from doubt_solver.l2_use_cases.dispatch_completion_use_case import CompletionDispatcher
from doubt_solver.l2_use_cases.ports.llm_client import LLMClient
from doubt_solver.l2_use_cases.utils.message_normalizer import normalize_messages
from doubt_solver.l2_use_cases.utils.prompt_builder import assemble_prompt


class SolveDoubtUseCase:
    """Normalize the history, inject the problem context, dispatch, return the reply.

    Stateless: the full history arrives with every call and nothing is kept.
    """

    def __init__(self, llm_client: LLMClient, model: str, template: TutorTemplate) -> None:
        self._dispatcher = CompletionDispatcher(llm_client, model)
        self._template = template

    async def execute(self, raw_messages: object, context: ProblemContext) -> str:
        """Run the pipeline. Raises validation or completion errors unchanged."""
        messages = normalize_messages(raw_messages)
        prompt = assemble_prompt(self._template, context, messages)
        return await self._dispatcher.dispatch(prompt)

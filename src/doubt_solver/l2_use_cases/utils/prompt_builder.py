"""Pure functions for building LLM prompts from templates."""

from __future__ import annotations

from doubt_solver.l1_entities.chat_message import ChatMessage
from doubt_solver.l1_entities.problem_context import ProblemContext
from doubt_solver.l1_entities.template import TutorTemplate


def build_system_prompt(template: TutorTemplate, context: ProblemContext) -> str:
    """Render the tutor system prompt for *context*.

    Substitution is a single ``str.format`` pass: braces inside problem fields
    are emitted literally and never expanded as further placeholders. A field
    the request did not send is not dropped or blanked: it renders as the
    literal text ``None`` (e.g. ``[PROBLEM_DESCRIPTION]: None``), so the model sees
    which parts of the problem are unknown. The template itself is checked for
    stray braces when it is loaded (see ``TutorTemplate``), so this call
    cannot fail on template syntax.
    """
    return template.system_prompt_template.format(
        title=context.title,
        description=context.description,
        test_cases=context.test_cases,
        start_code=context.start_code,
        redirect_message=template.redirect_message,
    )


def assemble_prompt(
    template: TutorTemplate,
    context: ProblemContext,
    messages: list[ChatMessage],
) -> list[ChatMessage]:
    """Return a fresh ``[system, *messages]`` list; *messages* is not modified."""
    system = ChatMessage(role='system', content=build_system_prompt(template, context))
    return [system, *messages]

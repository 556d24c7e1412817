"""ChatController: turns a raw request body into a status code and JSON payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from doubt_solver.l1_entities.errors import ErrorKind, InputShapeError
from doubt_solver.l1_entities.problem_context import ProblemContext
from doubt_solver.l2_use_cases.solve_doubt_use_case import SolveDoubtUseCase
from doubt_solver.l2_use_cases.utils.error_mapper import classify_error

log = logging.getLogger('dsv.controller')

MESSAGES_REQUIRED = 'Messages array is required'
RATE_LIMITED = 'Rate limit exceeded. Please try again in a moment.'
AUTH_FAILED = 'API authentication failed. Please check your API key.'
INVALID_FORMAT = 'Invalid request format'
INTERNAL_ERROR = 'Internal server error'

_CONTEXT_FIELDS = ('title', 'description', 'testCases', 'startCode')


@dataclass(frozen=True)
class ChatReply:
    status_code: int
    body: dict = field(default_factory=dict)


def problem_context_from(payload: Mapping) -> ProblemContext:
    """Pick the problem fields out of a request body. Non-string values are stringified."""
    values = {}
    for name in _CONTEXT_FIELDS:
        value = payload.get(name)
        values[name] = value if value is None or isinstance(value, str) else str(value)
    return ProblemContext.model_validate(values)


class ChatController:
    """Request boundary for the tutoring pipeline.

    Every failure is logged with its traceback and answered with a JSON body
    carrying a human-readable ``message``.
    """

    def __init__(self, use_case: SolveDoubtUseCase, *, expose_errors: bool = False) -> None:
        self._use_case = use_case
        self._expose_errors = expose_errors

    async def handle(self, body: object) -> ChatReply:
        payload = body if isinstance(body, Mapping) else {}
        raw_messages = payload.get('messages')
        if not isinstance(raw_messages, list):
            log.warning('Rejected chat request: %s', MESSAGES_REQUIRED)
            return ChatReply(400, {'message': MESSAGES_REQUIRED})

        try:
            context = problem_context_from(payload)
            reply = await self._use_case.execute(raw_messages, context)
        except InputShapeError:
            log.warning('Rejected chat request: %s', MESSAGES_REQUIRED)
            return ChatReply(400, {'message': MESSAGES_REQUIRED})
        except Exception as exc:
            log.error('Chat request failed: %s: %s', type(exc).__name__, exc, exc_info=True)
            return self.render_error(exc)

        log.info('Response sent successfully')
        return ChatReply(201, {'message': reply})

    def render_error(self, exc: BaseException) -> ChatReply:
        kind = classify_error(exc)
        if kind is ErrorKind.RATE_LIMITED:
            return ChatReply(429, {'message': RATE_LIMITED})
        if kind is ErrorKind.AUTH_FAILURE:
            return ChatReply(500, {'message': AUTH_FAILED})
        if kind is ErrorKind.BAD_REQUEST:
            return ChatReply(400, {'message': INVALID_FORMAT, 'error': str(exc)})
        body = {'message': INTERNAL_ERROR}
        if self._expose_errors:
            body['error'] = str(exc)
        return ChatReply(500, body)

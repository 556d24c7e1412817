"""FastAPI application exposing the tutoring chat endpoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from doubt_solver import __version__
from doubt_solver.l3_interface_adapters.controllers.chat_controller import ChatController

log = logging.getLogger('dsv.http')


def create_app(controller: ChatController) -> FastAPI:
    app = FastAPI(title='doubt-solver', version=__version__)

    @app.get('/health')
    async def health() -> dict[str, str]:
        return {'status': 'ok'}

    @app.post('/ai/chat')
    async def chat(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            log.warning('Request body is not valid JSON')
            body = None
        reply = await controller.handle(body)
        return JSONResponse(reply.body, status_code=reply.status_code)

    return app

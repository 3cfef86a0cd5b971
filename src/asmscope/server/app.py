"""Starlette application factory for the MCP HTTP endpoint."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from asmscope.protocols.errors import FramingError
from asmscope.protocols.mcp.models import INTERNAL_ERROR, JsonRpcResponse

if TYPE_CHECKING:
    from asmscope.protocols.mcp.dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Type alias for the call_next function
CallNext = Callable[[Request], Awaitable[Response]]


class CorsMiddleware(BaseHTTPMiddleware):
    """Answer preflight requests and stamp CORS headers on every response."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if request.method == "OPTIONS":
            response: Response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


def create_routes(dispatcher: RequestDispatcher, service_name: str) -> list[Route]:
    """Create the JSON-RPC and health routes bound to *dispatcher*."""

    async def rpc(request: Request) -> Response:
        body = await request.body()
        try:
            payload: dict[str, Any] = await run_in_threadpool(dispatcher.handle_body, body)
        except FramingError as exc:
            logger.warning("Rejected request: %s", exc)
            return PlainTextResponse("Invalid request", status_code=400)
        except Exception as exc:
            logger.exception("Error handling request")
            failure = JsonRpcResponse.failure(None, INTERNAL_ERROR, "Internal error", str(exc))
            return JSONResponse(failure.to_wire())
        return JSONResponse(payload)

    async def health(request: Request) -> JSONResponse:
        _ = request  # unused
        return JSONResponse({"status": "ok", "service": service_name})

    return [
        Route("/", rpc, methods=["POST"]),
        Route("/health", health, methods=["GET"]),
    ]


def create_app(dispatcher: RequestDispatcher, *, service_name: str = "asmscope") -> Starlette:
    """Create the Starlette application serving *dispatcher*."""
    app = Starlette(routes=create_routes(dispatcher, service_name))
    app.add_middleware(CorsMiddleware)
    return app

"""RequestDispatcher — routes JSON-RPC requests to MCP method handlers.

Every failure below the HTTP framing layer is converted into an error
envelope here, so :meth:`RequestDispatcher.dispatch` always returns a
well-formed response.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from asmscope.protocols.errors import (
    EntityNotFoundError,
    FramingError,
    MethodNotFoundError,
    ToolInputError,
)
from asmscope.protocols.mcp.models import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ListResourcesResult,
    ListToolsResult,
    ReadResourceResult,
    ResourceContent,
    ServerInfo,
)
from asmscope.utils.telemetry import ATTR_RPC_ERROR_CODE, ATTR_RPC_METHOD, get_tracer

if TYPE_CHECKING:
    from collections.abc import Callable

    from asmscope.core.resources import ResourceProvider
    from asmscope.tools.registry import ToolRegistry

    MethodHandler = Callable[[dict[str, Any] | None], dict[str, Any]]

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

SERVER_VERSION = "1.0.0"


class RequestDispatcher:
    """Stateless JSON-RPC router for the MCP methods this server speaks.

    Usage::

        dispatcher = RequestDispatcher(registry, resources, server_name="asmscope")
        payload = dispatcher.handle_body(raw_bytes)   # dict ready for JSON encoding
    """

    def __init__(
        self,
        registry: ToolRegistry,
        resources: ResourceProvider,
        *,
        server_name: str = "asmscope",
        server_version: str = SERVER_VERSION,
    ) -> None:
        self._registry = registry
        self._resources = resources
        self._server_info = ServerInfo(name=server_name, version=server_version)
        self._handlers: dict[str, MethodHandler] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
            "resources/list": self._list_resources,
            "resources/read": self._read_resource,
        }

    # -- framing ------------------------------------------------------------

    def parse(self, body: bytes | str) -> JsonRpcRequest:
        """Decode a request body into a :class:`JsonRpcRequest`.

        Raises:
            FramingError: The body is not a JSON object shaped like a request.
        """
        try:
            data: Any = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise FramingError(f"body is not valid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise FramingError("body is not a JSON object")
        try:
            return JsonRpcRequest.model_validate(data)
        except ValidationError as exc:
            raise FramingError(str(exc)) from exc

    def handle_body(self, body: bytes | str) -> dict[str, Any]:
        """Parse, dispatch and serialize one request body."""
        return self.dispatch(self.parse(body)).to_wire()

    # -- routing ------------------------------------------------------------

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Route *request* to its handler; never raises."""
        with _tracer.start_as_current_span("asmscope.rpc.dispatch") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)

            if request.method.startswith("notifications/"):
                logger.info("MCP notification: %s", request.method)
                return JsonRpcResponse.success(request.id, {})

            logger.info("MCP request: %s", request.method)
            try:
                handler = self._handlers.get(request.method)
                if handler is None:
                    raise MethodNotFoundError(request.method)
                return JsonRpcResponse.success(request.id, handler(request.params))
            except MethodNotFoundError as exc:
                code = METHOD_NOT_FOUND
                error: Exception = exc
            except Exception as exc:
                code = INTERNAL_ERROR
                error = exc

            logger.warning("Error in %s: %s", request.method, error)
            span.set_attribute(ATTR_RPC_ERROR_CODE, code)
            return JsonRpcResponse.failure(request.id, code, str(error))

    # -- methods ------------------------------------------------------------

    def _initialize(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return InitializeResult(server_info=self._server_info).to_wire()

    def _ping(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return {}

    def _list_tools(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return ListToolsResult(tools=self._registry.list_tools()).to_wire()

    def _call_tool(self, params: dict[str, Any] | None) -> dict[str, Any]:
        if params is None:
            raise ToolInputError("Parameters required")
        name = params.get("name")
        arguments = params.get("arguments")
        if not isinstance(name, str) or not (arguments is None or isinstance(arguments, dict)):
            raise ToolInputError("Invalid tool call parameters")
        return self._registry.execute(name, arguments).to_wire()

    def _list_resources(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return ListResourcesResult(resources=self._resources.list_resources()).to_wire()

    def _read_resource(self, params: dict[str, Any] | None) -> dict[str, Any]:
        if params is None:
            raise ToolInputError("Parameters required")
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            raise ToolInputError("Resource URI required")
        text = self._resources.read_resource(uri)
        if text is None:
            raise EntityNotFoundError("Resource", uri)
        return ReadResourceResult(contents=[ResourceContent(uri=uri, text=text)]).to_wire()

"""Server lifecycle — run the Starlette app under uvicorn on a background thread."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import uvicorn

from asmscope.utils.logbuffer import LogBuffer

if TYPE_CHECKING:
    from starlette.applications import Starlette

    from asmscope.config.models import ServerSettings

logger = logging.getLogger(__name__)

_ROOT_LOGGER = "asmscope"
_JOIN_TIMEOUT = 5.0


class MCPServer:
    """Owns the HTTP listener and its enable flag.

    ``start()`` and ``stop()`` are idempotent; ``stop()`` is safe when the
    server was never started.  Flipping :meth:`set_enabled` starts or stops
    the listener without restarting the process.

    Usage::

        server = MCPServer(config.server, create_app(dispatcher))
        server.start()
        ...
        server.stop()
    """

    def __init__(
        self,
        settings: ServerSettings,
        app: Starlette,
        *,
        log_buffer: LogBuffer | None = None,
    ) -> None:
        self._settings = settings
        self._app = app
        self._enabled = settings.enabled
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

        self.log_buffer = log_buffer or LogBuffer(level=logging.INFO)
        root = logging.getLogger(_ROOT_LOGGER)
        if self.log_buffer not in root.handlers:
            root.addHandler(self.log_buffer)
        # Requests are buffered at INFO whatever the console verbosity is.
        if root.getEffectiveLevel() > logging.INFO:
            root.setLevel(logging.INFO)

    @property
    def app(self) -> Starlette:
        return self._app

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def address(self) -> str:
        return f"http://{self._settings.host}:{self._settings.port}"

    def start(self) -> None:
        """Start listening unless disabled or already running."""
        with self._lock:
            if not self._enabled:
                logger.info("MCP server is disabled")
                return
            if self.is_running:
                return

            logger.info("Starting MCP server on %s:%s", self._settings.host, self._settings.port)
            config = uvicorn.Config(
                self._app,
                host=self._settings.host,
                port=self._settings.port,
                log_level="warning",
            )
            self._server = uvicorn.Server(config)
            self._thread = threading.Thread(
                target=self._server.run,
                name="asmscope-http",
                daemon=True,
            )
            self._thread.start()
            logger.info("MCP server started on %s:%s", self._settings.host, self._settings.port)

    def stop(self) -> None:
        """Ask uvicorn to exit and wait for the listener thread."""
        with self._lock:
            server, thread = self._server, self._thread
            self._server = None
            self._thread = None
            if server is None or thread is None:
                return

            server.should_exit = True
            thread.join(timeout=_JOIN_TIMEOUT)
            if thread.is_alive():
                logger.warning("MCP server did not stop within %.0fs", _JOIN_TIMEOUT)
            else:
                logger.info("MCP server stopped")

    def set_enabled(self, enabled: bool) -> None:
        """Toggle the enable flag, starting or stopping the listener to match."""
        with self._lock:
            if enabled == self._enabled:
                return
            self._enabled = enabled
        if enabled:
            logger.info("Starting MCP server")
            self.start()
        else:
            logger.info("Stopping MCP server")
            self.stop()

    def wait(self) -> None:
        """Block until the listener exits; Ctrl-C stops it."""
        try:
            while self.is_running:
                thread = self._thread
                if thread is not None:
                    thread.join(0.5)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()

"""Tracing for RPC dispatch, tool execution and path searches.

Modules obtain a tracer once at import time::

    from asmscope.utils.telemetry import ATTR_TOOL_NAME, get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("asmscope.tool.execute") as span:
        span.set_attribute(ATTR_TOOL_NAME, name)

Only ``opentelemetry-api`` is required at runtime; spans are no-ops until
:func:`configure_telemetry` installs an SDK tracer provider (``otel`` extra).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from asmscope.config.models import TelemetrySettings

ATTR_RPC_METHOD = "asmscope.rpc.method"
ATTR_RPC_ERROR_CODE = "asmscope.rpc.error_code"
ATTR_TOOL_NAME = "asmscope.tool.name"
ATTR_TOOL_IS_ERROR = "asmscope.tool.is_error"
ATTR_PATH_FROM = "asmscope.path.from"
ATTR_PATH_TO = "asmscope.path.to"
ATTR_PATH_MAX_DEPTH = "asmscope.path.max_depth"
ATTR_PATH_VISITED = "asmscope.path.visited"
ATTR_PATH_FOUND = "asmscope.path.found"

_INSTRUMENTATION_NAME = "asmscope"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(settings: TelemetrySettings, *, service_name: str = "asmscope") -> bool:
    """Install an SDK tracer provider if *settings* enables tracing.

    Spans go to the OTLP/gRPC endpoint when one is configured and to
    stdout otherwise.  Returns whether a provider was installed.

    Raises:
        ImportError: ``opentelemetry-sdk`` (or, for OTLP, the exporter) is missing.
    """
    if not settings.enabled:
        return False

    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
    except ImportError as exc:
        msg = "opentelemetry-sdk is required for tracing; install asmscope[otel]"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(_span_processor(settings.otlp_endpoint))
    trace.set_tracer_provider(provider)
    return True


def _span_processor(otlp_endpoint: str | None) -> Any:
    from opentelemetry.sdk.trace.export import (
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    if otlp_endpoint is None:
        return SimpleSpanProcessor(ConsoleSpanExporter())

    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    except ImportError as exc:
        msg = "opentelemetry-exporter-otlp is required for OTLP export; install asmscope[otel]"
        raise ImportError(msg) from exc
    return BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))

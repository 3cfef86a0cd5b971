"""Pydantic models for the ``asmscope serve`` configuration file."""

from __future__ import annotations

from pydantic import BaseModel, Field

from asmscope.core.graph import DEFAULT_MAX_DEPTH
from asmscope.core.paging import DEFAULT_PAGE_SIZE
from asmscope.utils.logbuffer import DEFAULT_CAPACITY


class ServerSettings(BaseModel):
    """Where and whether the HTTP endpoint listens."""

    enabled: bool = True
    host: str = "localhost"
    port: int = Field(default=3000, ge=0, le=65535)
    service_name: str = "asmscope"


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class AppConfig(BaseModel):
    """Top-level configuration parsed from YAML."""

    server: ServerSettings = Field(default_factory=ServerSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    snapshots: list[str] = []
    resources_dir: str | None = None
    log_capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)

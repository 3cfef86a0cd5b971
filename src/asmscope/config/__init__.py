"""Server configuration."""

from asmscope.config.loader import ConfigError, ConfigLoader
from asmscope.config.models import AppConfig, ServerSettings, TelemetrySettings

__all__ = ["AppConfig", "ConfigError", "ConfigLoader", "ServerSettings", "TelemetrySettings"]

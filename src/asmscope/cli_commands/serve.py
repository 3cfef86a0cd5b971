"""``asmscope serve`` — run the MCP HTTP server over metadata snapshots."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from asmscope.cli_commands._output import console
from asmscope.config import AppConfig, ConfigError, ConfigLoader
from asmscope.core.metadata import SnapshotError, SnapshotLoader
from asmscope.core.resources import MarkdownResources
from asmscope.protocols.mcp.dispatcher import RequestDispatcher
from asmscope.server.app import create_app
from asmscope.server.lifecycle import MCPServer
from asmscope.tools.registry import ToolRegistry
from asmscope.utils.logbuffer import LogBuffer
from asmscope.utils.telemetry import configure_telemetry


def build_server(config: AppConfig) -> MCPServer:
    """Wire snapshots, resources, tools and the HTTP app into an :class:`MCPServer`."""
    provider = SnapshotLoader([Path(p) for p in config.snapshots]).load()
    resources = (
        MarkdownResources.from_directory(Path(config.resources_dir))
        if config.resources_dir
        else MarkdownResources()
    )
    registry = ToolRegistry(
        provider,
        page_size=config.page_size,
        default_max_depth=config.max_depth,
    )
    dispatcher = RequestDispatcher(registry, resources, server_name=config.server.service_name)
    app = create_app(dispatcher, service_name=config.server.service_name)
    return MCPServer(config.server, app, log_buffer=LogBuffer(config.log_capacity))


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file.",
)
@click.option(
    "--snapshot",
    "-s",
    "snapshots",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Metadata snapshot file (repeatable).",
)
@click.option(
    "--resources",
    "resources_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of markdown documents served as resources.",
)
@click.option("--host", default=None, help="Listen address.")
@click.option("--port", type=int, default=None, help="Listen port.")
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def serve(
    config_file: str | None,
    snapshots: tuple[str, ...],
    resources_dir: str | None,
    host: str | None,
    port: int | None,
    telemetry: bool,
    verbose: bool,
) -> None:
    """Serve assembly metadata to MCP clients over HTTP."""
    try:
        config = ConfigLoader(Path(config_file)).load() if config_file else AppConfig()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    config.snapshots.extend(snapshots)
    if resources_dir is not None:
        config.resources_dir = resources_dir
    if host is not None:
        config.server.host = host
    if port is not None:
        config.server.port = port
    if telemetry:
        config.telemetry.enabled = True

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(level=logging.WARNING, handlers=[console_handler])

    try:
        configure_telemetry(config.telemetry, service_name=config.server.service_name)
    except ImportError as exc:
        console.print(f"[red]Telemetry error:[/red] {exc}")
        sys.exit(1)

    try:
        server = build_server(config)
    except SnapshotError as exc:
        console.print(f"[red]Snapshot error:[/red] {exc}")
        sys.exit(1)

    if not server.enabled:
        console.print("[yellow]Server is disabled in configuration.[/yellow]")
        return

    server.start()
    console.print(f"[green]Serving MCP on {server.address}[/green] (Ctrl-C to stop)")
    server.wait()

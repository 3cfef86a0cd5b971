"""``asmscope tools`` — list and call tools on a running server."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click

from asmscope.cli_commands._output import console, print_tool_result, print_tools_table
from asmscope.protocols.mcp.client import MCPHttpClient
from asmscope.protocols.mcp.models import CallToolResult, MCPToolDef


@click.group()
def tools() -> None:
    """List and call tools on an MCP server."""


@tools.command("list")
@click.argument("url")
def list_cmd(url: str) -> None:
    """List the tools served at URL."""

    async def _list() -> list[MCPToolDef]:
        async with MCPHttpClient(url) as client:
            await client.initialize()
            return await client.list_tools()

    try:
        tool_defs = asyncio.run(_list())
    except Exception as exc:
        console.print(f"[red]Discovery error:[/red] {exc}")
        sys.exit(1)

    if not tool_defs:
        console.print("[yellow]No tools served.[/yellow]")
        return

    print_tools_table(tool_defs)


@tools.command("call")
@click.argument("url")
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
def call_cmd(url: str, name: str, raw_args: str) -> None:
    """Call tool NAME on the server at URL."""
    try:
        arguments: Any = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--args") from exc
    if not isinstance(arguments, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")

    async def _call() -> CallToolResult:
        async with MCPHttpClient(url) as client:
            return await client.call_tool(name, arguments)

    try:
        result = asyncio.run(_call())
    except Exception as exc:
        console.print(f"[red]Call error:[/red] {exc}")
        sys.exit(1)

    print_tool_result(result)
    if result.is_error:
        sys.exit(1)

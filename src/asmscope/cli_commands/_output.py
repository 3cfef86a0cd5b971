"""Shared CLI output formatters."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from asmscope.protocols.mcp.models import CallToolResult, MCPToolDef  # noqa: TC001

console = Console()


def print_tools_table(tools: list[MCPToolDef]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Server Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Required")
    table.add_column("Description")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(tool.name, ", ".join(required) or "-", _truncate(tool.description))

    console.print(table)


def print_tool_result(result: CallToolResult) -> None:
    """Print a tool result's text, flagged red when the tool reported an error."""
    if result.is_error:
        console.print(f"[red]Tool error:[/red] {escape(result.text)}")
        return
    console.print(result.text, markup=False, highlight=False)


def print_paths_table(paths: list[dict[str, Any]]) -> None:
    """Pretty-print ``find_path_to_type`` path entries as a table."""
    table = Table(title="Member Paths")
    table.add_column("Target", style="cyan")
    table.add_column("Depth", justify="right")
    table.add_column("Path")

    for path in paths:
        table.add_row(path["target"], str(path["depth"]), path["path"])

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."

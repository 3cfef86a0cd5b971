"""``asmscope find-path`` — search member chains in a snapshot without a server."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from asmscope.cli_commands._output import console, print_paths_table
from asmscope.core.graph import DEFAULT_MAX_DEPTH
from asmscope.core.metadata import SnapshotError, SnapshotLoader
from asmscope.protocols.errors import ToolInputError
from asmscope.tools.registry import ToolRegistry


@click.command("find-path")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.argument("assembly")
@click.argument("from_type")
@click.argument("to_type")
@click.option("--max-depth", type=click.IntRange(min=0), default=DEFAULT_MAX_DEPTH, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def find_path(
    snapshot: str,
    assembly: str,
    from_type: str,
    to_type: str,
    max_depth: int,
    as_json: bool,
) -> None:
    """Find how TO_TYPE is reachable from FROM_TYPE through properties and fields.

    FROM_TYPE is an exact full name; TO_TYPE may be a partial name.
    """
    try:
        provider = SnapshotLoader([Path(snapshot)]).load()
    except SnapshotError as exc:
        console.print(f"[red]Error loading snapshot:[/red] {exc}")
        sys.exit(1)

    arguments = {
        "assembly_name": assembly,
        "from_type": from_type,
        "to_type": to_type,
        "max_depth": max_depth,
    }
    try:
        result = ToolRegistry(provider).execute("find_path_to_type", arguments)
    except ToolInputError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    if result.is_error:
        console.print(result.text, style="red", markup=False)
        sys.exit(1)

    try:
        paths = json.loads(result.text)["paths"]
    except json.JSONDecodeError:
        # No reachable target: the tool answers with a plain sentence.
        paths = []

    if as_json:
        console.print_json(json.dumps(paths))
        return
    if not paths:
        console.print(result.text, style="yellow", markup=False)
        return
    print_paths_table(paths)

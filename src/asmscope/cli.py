"""asmscope CLI entrypoint."""

from __future__ import annotations

import click

from asmscope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="asmscope")
def main() -> None:
    """asmscope — MCP server for .NET assembly metadata."""


# Register subcommands
from asmscope.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()

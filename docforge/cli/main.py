"""
Command-line interface for docforge.
"""

from __future__ import annotations

import json
import sys
from typing import Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..tools import registry

console = Console()
error_console = Console(stderr=True)


def _parse_arguments(raw: str) -> dict:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"must be valid JSON ({exc.msg})", param_hint="--args") from exc
    if not isinstance(payload, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")
    return payload


@click.group()
@click.version_option(version=__version__, prog_name="docforge")
def cli():
    """
    docforge - PDF, DOCX, HTML and text operations behind one dispatcher.
    """


@cli.command(name="list")
def list_operations():
    """
    List every available operation.
    """
    table = Table(title="Operations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description", style="green")
    table.add_column("Arguments")

    for tool_class in registry:
        schema = tool_class.request_type.input_schema()
        required = set(schema["required"])
        fields = [name if name in required else f"[{name}]" for name in schema["properties"]]
        table.add_row(tool_class.name, tool_class.description, ", ".join(fields))

    console.print(table)


@cli.command(name="run")
@click.argument("operation")
@click.option(
    "--args", "-a",
    "raw_arguments",
    default="{}",
    show_default=True,
    help="Operation arguments as a JSON object",
)
def run_operation(operation, raw_arguments):
    """
    Run OPERATION with a JSON argument bag.

    Examples:

        docforge run pdf_merger --args '{"inputPaths": ["a.pdf", "b.pdf"], "outputDir": "out"}'

        docforge run document_reader -a '{"filePath": "notes.txt"}'
    """
    arguments = _parse_arguments(raw_arguments)
    result = registry.dispatch(operation, arguments)
    if result.success:
        click.echo(result.message)
        return
    error_console.print(f"[bold red]✗ Error:[/bold red] {escape(result.message)}", highlight=False)
    sys.exit(1)


@cli.command(name="serve")
def serve():
    """
    Serve every operation as an MCP tool over stdio.
    """
    from ..server.mcp_server import run

    run()


def main(argv: Sequence[str] | None = None) -> None:
    cli.main(args=list(argv) if argv is not None else None, prog_name="docforge")


if __name__ == "__main__":  # pragma: no cover
    main()

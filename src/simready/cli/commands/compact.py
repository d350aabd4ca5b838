"""Compact schedule commands.

``parse`` turns compact directive text into JSON rows and ``format`` turns
JSON rows back into directive lines.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from simready.application.schedules import (
    compact_rows_adapter,
    parse_compact_text,
    serialize_compact,
)

compact_app = typer.Typer(
    name="compact",
    help="Parse and format compact schedule text.",
)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error reading {path}: {e}", err=True)
        raise typer.Exit(code=1)


@compact_app.command(name="parse")
def parse_command(
    schedule_file: Annotated[
        Path,
        typer.Argument(help="Text file with one compact directive per line"),
    ],
) -> None:
    """Print the structured rows of a compact schedule as JSON.

    Example:
        simready compact parse office.txt
    """
    rows = parse_compact_text(_read_text(schedule_file))
    typer.echo(compact_rows_adapter.dump_json(rows, indent=2).decode())


@compact_app.command(name="format")
def format_command(
    rows_file: Annotated[
        Path,
        typer.Argument(help="JSON file holding a list of compact rows"),
    ],
) -> None:
    """Print compact directive lines for a JSON list of rows.

    Example:
        simready compact format rows.json
    """
    try:
        rows = compact_rows_adapter.validate_json(_read_text(rows_file))
    except PydanticValidationError as e:
        typer.echo("Errors:", err=True)
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            typer.echo(f"  {loc}: {err['msg']}", err=True)
        raise typer.Exit(code=1)

    for line in serialize_compact(rows):
        typer.echo(line)

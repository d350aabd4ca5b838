"""Shared input loading and error display for CLI commands."""

from pathlib import Path

import typer

from simready.application.config import (
    ConfigError,
    ConfigurationDocument,
    Zone,
    load_document,
    load_zones,
)


def display_load_error(error: ConfigError) -> None:
    """Display an input loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_inputs(
    document_file: Path, zones_file: Path | None, strict: bool
) -> tuple[ConfigurationDocument, list[Zone]]:
    """Load the document and zone list, exiting with code 1 on failure."""
    try:
        document = load_document(document_file, strict=strict)
        zones = load_zones(zones_file) if zones_file is not None else []
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return document, zones

"""Validate command for checking configuration documents.

This module provides the `validate` command that cross-checks a document's
references (constructions, materials, schedules, loads, thermostats,
sizing) against each other and against a zone list.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer

from simready.application.config import (
    Diagnostics,
    Severity,
    IntegrityResult,
    check_document_integrity,
    validate,
)
from simready.cli.commands.common import load_inputs


def validate_command(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration document"),
    ],
    zones_file: Annotated[
        Path | None,
        typer.Option("--zones", "-z", help="Path to a JSON zone list"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on schema errors instead of skipping bad entries"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print diagnostics as JSON"),
    ] = False,
) -> None:
    """Validate a configuration document.

    Checks the document for:
    - JSON syntax errors
    - Duplicate names within a kind
    - Missing constructions and materials (errors)
    - Missing schedules, inconsistent loads, thermostat and sizing issues (warnings)

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors
        2 - Document is valid but has warnings

    Example:
        simready validate project.json --zones zones.json
    """
    document, zones = load_inputs(document_file, zones_file, strict)

    diagnostics = validate(document, zones)
    integrity = check_document_integrity(document)

    if as_json:
        payload = diagnostics.model_dump(mode="json", by_alias=True)
        payload["integrity"] = {
            "errors": [asdict(e) for e in integrity.errors],
            "warnings": [asdict(w) for w in integrity.warnings],
        }
        typer.echo(json.dumps(payload, indent=2, default=str))
    else:
        typer.echo(f"Validating {document_file}...")
        typer.echo()
        _display_integrity(integrity)
        _display_diagnostics(diagnostics)

    raise typer.Exit(code=_exit_code(diagnostics, integrity))


def _exit_code(diagnostics: Diagnostics, integrity: IntegrityResult) -> int:
    if diagnostics.exit_code == 1 or integrity.exit_code == 1:
        return 1
    return max(diagnostics.exit_code, integrity.exit_code)


def _display_integrity(result: IntegrityResult) -> None:
    """Display duplicate-name errors and warnings."""
    if result.errors:
        typer.echo("Integrity errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Integrity warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()


def _display_diagnostics(diagnostics: Diagnostics) -> None:
    """Display referential issues and a summary line."""
    errors = [i for i in diagnostics.issues if i.severity == Severity.ERROR]
    warnings = [i for i in diagnostics.issues if i.severity == Severity.WARNING]

    if errors:
        typer.echo("Errors:", err=True)
        for issue in errors:
            typer.echo(f"  {issue.path}: {issue.message}", err=True)
        typer.echo()

    if warnings:
        typer.echo("Warnings:")
        for issue in warnings:
            typer.echo(f"  {issue.path}: {issue.message}")
        typer.echo()

    zone_count = diagnostics.geometry.totals.zones
    typer.echo(f"Zones: {zone_count}")
    if errors:
        typer.echo(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)",
            err=True,
        )
    elif warnings:
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Document is consistent.")

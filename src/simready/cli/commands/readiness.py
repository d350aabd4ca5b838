"""Readiness command for the simulation checklist."""

import json
from pathlib import Path
from typing import Annotated

import typer

from simready.application.config import validate
from simready.application.readiness import ReadinessReport, StepStatus, evaluate_report
from simready.cli.commands.common import load_inputs
from simready.infrastructure.runtime import ENGINE_PATH_ENV, detect_runtime_capabilities

_STATUS_MARKS = {
    StepStatus.OK: "[ok]",
    StepStatus.WARNING: "[warn]",
    StepStatus.ERROR: "[error]",
}

_EXIT_CODES = {StepStatus.OK: 0, StepStatus.ERROR: 1, StepStatus.WARNING: 2}


def readiness_command(
    document_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration document"),
    ],
    zones_file: Annotated[
        Path | None,
        typer.Option("--zones", "-z", help="Path to a JSON zone list"),
    ] = None,
    engine_path: Annotated[
        Path | None,
        typer.Option(
            "--engine-path",
            envvar=ENGINE_PATH_ENV,
            help="Simulation engine executable (default: energyplus on PATH)",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the checklist as JSON"),
    ] = False,
) -> None:
    """Show the seven-step simulation readiness checklist.

    Exit codes:
        0 - Every step is ok
        1 - At least one step is an error
        2 - Warnings only

    Example:
        simready readiness project.json --zones zones.json
    """
    document, zones = load_inputs(document_file, zones_file, strict=False)

    diagnostics = validate(document, zones)
    capabilities = detect_runtime_capabilities(engine_path)
    report = evaluate_report(diagnostics, document, capabilities, zones)

    if as_json:
        typer.echo(json.dumps(report.to_json_list(), indent=2))
    else:
        _display_report(report)

    raise typer.Exit(code=_EXIT_CODES[report.summary()])


def _display_report(report: ReadinessReport) -> None:
    for step in report:
        typer.echo(f"{_STATUS_MARKS[step.status]:<8}{step.label}")
        typer.echo(f"        {step.description}")
        actions = ", ".join(f"{a.label} ({a.action_id.value})" for a in step.actions)
        typer.echo(f"        Actions: {actions}")

    blocking = report.blocking_steps()
    typer.echo()
    if blocking:
        typer.echo(f"Blocked by: {', '.join(s.label for s in blocking)}", err=True)
    else:
        typer.echo(f"Overall: {report.summary().value}")

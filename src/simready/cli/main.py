"""Typer CLI for simulation input validation."""

import logging
from typing import Annotated

import typer

from simready.cli.commands import compact_app, readiness_command, validate_command

app = typer.Typer(
    name="simready",
    help="Validate building simulation inputs and check simulation readiness.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate building simulation inputs and check simulation readiness."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands
app.command(name="validate")(validate_command)
app.command(name="readiness")(readiness_command)

# Register compact subcommand group
app.add_typer(compact_app, name="compact")


if __name__ == "__main__":
    app()

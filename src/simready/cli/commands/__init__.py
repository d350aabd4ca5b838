"""CLI command implementations for the simready application.

This package contains subcommands for the simready CLI, including:
- validate: Cross-check a configuration document
- readiness: Show the simulation readiness checklist
- compact: Parse and format compact schedule text
"""

from simready.cli.commands.compact import compact_app
from simready.cli.commands.readiness import readiness_command
from simready.cli.commands.validate import validate_command

__all__ = ["compact_app", "readiness_command", "validate_command"]

"""Construction reference validator.

Checks that every construction named by the ``defaults`` section exists in
the document.
"""

from __future__ import annotations

from .context import ValidationContext
from .diagnostics import Finding, FindingKind


class ConstructionReferenceValidator:
    """Validator for construction references.

    A default construction that does not exist blocks IDF generation, so
    every finding here is reported as an error.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "constructions"

    def validate(self, context: ValidationContext) -> list[Finding]:
        """Report default construction slots naming undefined constructions.

        Args:
            context: Lookup tables for the document being validated

        Returns:
            Findings in slot order (wall, roof, floor, window)
        """
        findings: list[Finding] = []
        for slot, construction_name in context.document.defaults.references():
            if construction_name in context.construction_names:
                continue
            findings.append(
                Finding(
                    kind=FindingKind.MISSING_CONSTRUCTION,
                    subject=construction_name,
                    message=(
                        f"Default construction '{construction_name}' ({slot}) "
                        "is not defined"
                    ),
                    path=f"defaults.{slot}",
                )
            )
        return findings

"""Sizing zone reference validator."""

from __future__ import annotations

from .context import ValidationContext
from .diagnostics import Finding, FindingKind


class SizingValidator:
    """Validator for zone sizing overrides.

    An override keyed by a zone the geometry model does not report is never
    applied. Like the thermostat zone check, this only runs once zones exist.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "sizing"

    def validate(self, context: ValidationContext) -> list[Finding]:
        if not context.zone_names:
            return []
        return [
            Finding(
                kind=FindingKind.UNKNOWN_SIZING_ZONE,
                subject=zone_name,
                message=f"Sizing override targets unknown zone '{zone_name}'",
                path=f"sizing.zones.{zone_name}",
            )
            for zone_name in context.document.sizing.zones
            if not context.has_zone(zone_name)
        ]

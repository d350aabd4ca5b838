"""Internal gain consistency validator."""

from __future__ import annotations

from simready.application.config.schemas import InternalGainEntry, is_set

from .context import ValidationContext
from .diagnostics import Finding, FindingKind


class LoadConsistencyValidator:
    """Validator for internal gain entries.

    An entry is inconsistent when:
    - its method is not one the gain family understands
    - the magnitude field for its method is absent, non-finite, or negative
    - it names no zone, or a zone the geometry model does not report

    Zone membership is checked even when the zone list is empty, in which
    case every zone-bound entry is inconsistent.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "loads"

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for family, i, entry in context.document.internal_gains.entries():
            reasons = self._reasons(entry, context)
            if not reasons:
                continue
            findings.append(
                Finding(
                    kind=FindingKind.INCONSISTENT_LOAD,
                    subject=entry.name,
                    message=f"Load '{entry.name}' is inconsistent: {'; '.join(reasons)}",
                    path=f"internalGains.{family.value}[{i}]",
                )
            )
        return findings

    def _reasons(
        self, entry: InternalGainEntry, context: ValidationContext
    ) -> list[str]:
        reasons: list[str] = []
        method = entry.effective_method
        fields = entry.magnitude_fields()
        if fields is None:
            reasons.append(f"unknown method '{method}'")
        elif entry.magnitude() is None:
            reasons.append(f"method '{method}' requires a finite, non-negative value")

        if not is_set(entry.zone_name):
            reasons.append("no zone assigned")
        elif not context.has_zone(entry.zone_name):
            reasons.append(f"zone '{entry.zone_name}' does not exist")
        return reasons

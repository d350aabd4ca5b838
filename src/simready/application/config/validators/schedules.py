"""Schedule reference validator.

Schedule names share one namespace across all six kinds, so a reference
resolves if any schedule of any kind carries that name.
"""

from __future__ import annotations

from typing import Iterator

from simready.application.config.schemas import ScheduleKind, is_set

from .context import ValidationContext
from .diagnostics import Finding, FindingKind

# Schedule kinds whose entries may name a type-limits object
_TYPE_LIMITED_KINDS = (
    ScheduleKind.DAY_HOURLY,
    ScheduleKind.COMPACT,
    ScheduleKind.CONSTANT,
    ScheduleKind.FILE,
)


class ScheduleReferenceValidator:
    """Validator for schedule name references.

    Walks references in a fixed order so diagnostics are stable:
    - type limits named by schedules
    - internal gain schedules
    - thermostat setpoint schedules
    - zone thermostat control type schedules
    - ideal loads availability schedules (global, then per zone)
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "schedules"

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for path, owner, schedule_name in self._references(context):
            if context.has_schedule(schedule_name):
                continue
            findings.append(
                Finding(
                    kind=FindingKind.MISSING_SCHEDULE,
                    subject=schedule_name,
                    message=f"{owner} references undefined schedule '{schedule_name}'",
                    path=path,
                )
            )
        return findings

    def _references(
        self, context: ValidationContext
    ) -> Iterator[tuple[str, str, str]]:
        """Yield (path, owner description, schedule name) for set references."""
        doc = context.document

        for kind, entries in doc.schedules.by_kind():
            if kind not in _TYPE_LIMITED_KINDS:
                continue
            for i, schedule in enumerate(entries):
                type_limits = getattr(schedule, "type_limits", None)
                if is_set(type_limits):
                    yield (
                        f"schedules.{kind.value}[{i}].typeLimits",
                        f"Schedule '{schedule.name}'",
                        type_limits,
                    )

        for family, i, entry in doc.internal_gains.entries():
            for alias, schedule_name in entry.schedule_references():
                yield (
                    f"internalGains.{family.value}[{i}].{alias}",
                    f"Load '{entry.name}'",
                    schedule_name,
                )

        for i, setpoint in enumerate(doc.thermostat_setpoints):
            for alias, schedule_name in setpoint.schedule_references():
                yield (
                    f"thermostatSetpoints[{i}].{alias}",
                    f"Thermostat setpoint '{setpoint.name}'",
                    schedule_name,
                )

        for i, mapping in enumerate(doc.thermostats):
            if is_set(mapping.control_type_schedule):
                yield (
                    f"thermostats[{i}].controlTypeSchedule",
                    f"Thermostat for zone '{mapping.zone_name}'",
                    mapping.control_type_schedule,
                )

        ideal_loads = doc.ideal_loads
        if ideal_loads.global_settings is not None:
            for alias, schedule_name in ideal_loads.global_settings.schedule_references():
                yield (
                    f"idealLoads.global.{alias}",
                    "Global ideal loads",
                    schedule_name,
                )
        for zone_name, settings in ideal_loads.per_zone.items():
            for alias, schedule_name in settings.schedule_references():
                yield (
                    f"idealLoads.perZone.{zone_name}.{alias}",
                    f"Ideal loads for zone '{zone_name}'",
                    schedule_name,
                )

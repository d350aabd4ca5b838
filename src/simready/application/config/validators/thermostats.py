"""Thermostat and ideal loads reference validator.

Zone thermostat mappings name setpoint objects by slot. Each slot expects a
setpoint of a particular control type, and each setpoint type requires a
particular set of schedule fields.
"""

from __future__ import annotations

from simready.application.config.schemas import GLOBAL_ZONE

from .context import ValidationContext
from .diagnostics import Finding, FindingKind


class ThermostatValidator:
    """Validator for thermostat mappings, setpoints, and ideal loads zones.

    Findings are advisory warnings. Zone membership is only judged when the
    geometry model reports at least one zone, since mappings written before
    geometry exists cannot be checked meaningfully. The GLOBAL pseudo-zone is
    always accepted.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "thermostats"

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        findings.extend(self._check_mapping_setpoints(context))
        findings.extend(self._check_setpoint_schedules(context))
        if context.zone_names:
            findings.extend(self._check_zones(context))
        return findings

    def _check_mapping_setpoints(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for i, mapping in enumerate(context.document.thermostats):
            for slot, setpoint_name, expected in mapping.setpoint_references():
                path = f"thermostats[{i}].{slot}"
                setpoint = context.setpoints.get(setpoint_name)
                if setpoint is None:
                    findings.append(
                        Finding(
                            kind=FindingKind.MISSING_SETPOINT,
                            subject=setpoint_name,
                            message=(
                                f"Thermostat for zone '{mapping.zone_name}' references "
                                f"undefined setpoint '{setpoint_name}'"
                            ),
                            path=path,
                        )
                    )
                elif setpoint.type != expected:
                    findings.append(
                        Finding(
                            kind=FindingKind.MISMATCHED_SETPOINT,
                            subject=setpoint_name,
                            message=(
                                f"Setpoint '{setpoint_name}' is {setpoint.type.value} "
                                f"but {slot} expects {expected.value}"
                            ),
                            path=path,
                        )
                    )
        return findings

    def _check_setpoint_schedules(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for i, setpoint in enumerate(context.document.thermostat_setpoints):
            missing = setpoint.missing_schedule_fields()
            if not missing:
                continue
            findings.append(
                Finding(
                    kind=FindingKind.INCOMPLETE_SETPOINT,
                    subject=setpoint.name,
                    message=(
                        f"{setpoint.type.value} setpoint '{setpoint.name}' is missing "
                        f"{', '.join(missing)}"
                    ),
                    path=f"thermostatSetpoints[{i}].{missing[0]}",
                )
            )
        return findings

    def _check_zones(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for i, mapping in enumerate(context.document.thermostats):
            zone_name = mapping.zone_name
            if zone_name == GLOBAL_ZONE or context.has_zone(zone_name):
                continue
            findings.append(
                Finding(
                    kind=FindingKind.UNKNOWN_THERMOSTAT_ZONE,
                    subject=zone_name,
                    message=f"Thermostat mapping targets unknown zone '{zone_name}'",
                    path=f"thermostats[{i}].zoneName",
                )
            )
        for zone_name in context.document.ideal_loads.per_zone:
            if zone_name == GLOBAL_ZONE or context.has_zone(zone_name):
                continue
            findings.append(
                Finding(
                    kind=FindingKind.UNKNOWN_THERMOSTAT_ZONE,
                    subject=zone_name,
                    message=f"Ideal loads override targets unknown zone '{zone_name}'",
                    path=f"idealLoads.perZone.{zone_name}",
                )
            )
        return findings

"""Readiness checklist models.

The checklist is a fixed sequence of seven steps. Each step carries its own
status and the editor actions that let a user fix, or double-check, it.
Statuses are never combined across steps by the engine; ``ReadinessReport``
offers an aggregated view for hosts that want one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.validators import Diagnostics
from simready.contracts.host import RuntimeCapabilities


class StepStatus(str, Enum):
    """Step status, in increasing severity."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {StepStatus.OK: 0, StepStatus.WARNING: 1, StepStatus.ERROR: 2}


class StepId(str, Enum):
    """Stable identifiers of the seven readiness steps, in order."""

    GEOMETRY = "geometry"
    CONSTRUCTIONS = "constructions"
    SCHEDULES_LOADS = "schedules-loads"
    THERMOSTATS_IDEAL_LOADS = "thermostats-ideal-loads"
    WEATHER_LOCATION = "weather-location"
    IDF_GENERATION = "idf-generation"
    RUN_ENERGYPLUS = "run-energyplus"


class ActionId(str, Enum):
    """Editor commands a step can point at. The host maps these to handlers."""

    OPEN_DIAGNOSTICS = "open-diagnostics"
    OPEN_CONSTRUCTIONS = "open-constructions"
    OPEN_MATERIALS = "open-materials"
    OPEN_SCHEDULES = "open-schedules"
    OPEN_ZONE_LOADS = "open-zone-loads"
    OPEN_IDEAL_LOADS = "open-ideal-loads"
    OPEN_WEATHER_LOCATION = "open-weather-location"
    GENERATE_IDF = "generate-idf"
    OPEN_ANNUAL = "open-annual"
    OPEN_HEATING_DD = "open-heating-dd"
    OPEN_COOLING_DD = "open-cooling-dd"


class ReadinessModel(BaseModel):
    """Frozen base for readiness output, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class StepAction(ReadinessModel):
    """A labelled pointer to an editor."""

    label: str
    action_id: ActionId


class ReadinessStep(ReadinessModel):
    """One checklist step."""

    id: StepId
    label: str
    status: StepStatus
    description: str
    actions: tuple[StepAction, ...] = Field(..., min_length=1)


@dataclass(frozen=True)
class ReadinessInputs:
    """Everything a readiness rule may look at.

    Attributes:
        diagnostics: Output of referential validation
        document: The configuration document that was validated
        capabilities: What the host environment can run
        live_zones: Zones reported by the host right now, if it has them
    """

    diagnostics: Diagnostics
    document: ConfigurationDocument
    capabilities: RuntimeCapabilities
    live_zones: tuple[Zone, ...] = ()

    @property
    def has_zones(self) -> bool:
        return self.diagnostics.geometry.totals.zones > 0 or len(self.live_zones) > 0

    @property
    def has_blocking_references(self) -> bool:
        """Missing constructions or materials: blocks generation and runs."""
        return self.diagnostics.has_blocking_references

    @property
    def has_schedule_or_load_findings(self) -> bool:
        return self.diagnostics.has_schedule_or_load_findings

    @property
    def has_weather_file(self) -> bool:
        return self.document.epw_path is not None


@dataclass(frozen=True)
class ReadinessReport:
    """The seven steps in order, with an optional aggregated view."""

    steps: tuple[ReadinessStep, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> ReadinessStep:
        return self.steps[index]

    def step(self, step_id: StepId | str) -> ReadinessStep:
        """Look up a step by id.

        Raises:
            KeyError: If no step has that id.
        """
        for candidate in self.steps:
            if candidate.id == step_id:
                return candidate
        raise KeyError(f"No readiness step with id '{step_id}'")

    def blocking_steps(self) -> list[ReadinessStep]:
        """Steps in error state, in checklist order."""
        return [s for s in self.steps if s.status == StepStatus.ERROR]

    def summary(self) -> StepStatus:
        """The most severe status of any step."""
        worst = StepStatus.OK
        for s in self.steps:
            if s.status.rank > worst.rank:
                worst = s.status
        return worst

    def to_json_list(self) -> list[dict]:
        """Serialize every step with camelCase keys."""
        return [s.model_dump(mode="json", by_alias=True) for s in self.steps]

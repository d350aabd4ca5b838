"""Readiness rules, one per checklist step.

Each rule reads only the inputs relevant to its own step. Steps 6 and 7
reuse the blocking and warning conditions of steps 2 and 3 directly rather
than reading other steps' results, so no step's status feeds another.
"""

from __future__ import annotations

from simready.application.config.schemas import LocationSource

from .models import (
    ActionId,
    ReadinessInputs,
    ReadinessStep,
    StepAction,
    StepId,
    StepStatus,
)


def _action(label: str, action_id: ActionId) -> StepAction:
    return StepAction(label=label, action_id=action_id)


def _step(
    step_id: StepId,
    label: str,
    status: StepStatus,
    description: str,
    actions: list[StepAction],
) -> ReadinessStep:
    return ReadinessStep(
        id=step_id,
        label=label,
        status=status,
        description=description,
        actions=tuple(actions),
    )


class GeometryRule:
    """Step 1: at least one zone exists.

    Without zones the model generator falls back to a single default zone,
    so this is a warning rather than an error.
    """

    step_id = StepId.GEOMETRY
    label = "1. Geometry"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        actions = [_action("Open Diagnostics", ActionId.OPEN_DIAGNOSTICS)]
        if inputs.has_zones:
            return _step(
                self.step_id,
                self.label,
                StepStatus.OK,
                "Project zones detected. Your geometry appears ready for simulation.",
                actions,
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.WARNING,
            "No explicit zones found. IDF will fall back to a default Zone_1.",
            actions,
        )


class ConstructionsRule:
    """Step 2: every referenced construction and material exists."""

    step_id = StepId.CONSTRUCTIONS
    label = "2. Constructions & Materials"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        if inputs.has_blocking_references:
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "Missing constructions or materials referenced by the model. "
                "Please review the diagnostics.",
                [
                    _action("Open Constructions", ActionId.OPEN_CONSTRUCTIONS),
                    _action("Open Materials", ActionId.OPEN_MATERIALS),
                    _action("Diagnostics", ActionId.OPEN_DIAGNOSTICS),
                ],
            )

        doc = inputs.document
        actions = [
            _action("Open Constructions", ActionId.OPEN_CONSTRUCTIONS),
            _action("Open Materials", ActionId.OPEN_MATERIALS),
        ]
        if doc.constructions or doc.materials:
            return _step(
                self.step_id,
                self.label,
                StepStatus.OK,
                "Constructions and materials are configured.",
                actions,
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.WARNING,
            "Using built-in defaults only. Review for project-specific envelopes.",
            actions,
        )


class SchedulesLoadsRule:
    """Step 3: schedules resolve and zone loads are consistent and present."""

    step_id = StepId.SCHEDULES_LOADS
    label = "3. Schedules & Zone Loads"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        if inputs.has_schedule_or_load_findings:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "Some schedules or zone loads may be missing or inconsistent.",
                [
                    _action("Open Schedules", ActionId.OPEN_SCHEDULES),
                    _action("Open Zone Loads", ActionId.OPEN_ZONE_LOADS),
                    _action("Diagnostics", ActionId.OPEN_DIAGNOSTICS),
                ],
            )

        actions = [
            _action("Open Schedules", ActionId.OPEN_SCHEDULES),
            _action("Open Zone Loads", ActionId.OPEN_ZONE_LOADS),
        ]
        if inputs.document.internal_gains.count() > 0:
            return _step(
                self.step_id,
                self.label,
                StepStatus.OK,
                "Zone loads and schedules configured.",
                actions,
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.WARNING,
            "No explicit zone loads defined. Results may under-estimate internal gains.",
            actions,
        )


class ThermostatsIdealLoadsRule:
    """Step 4: thermostats and ideal loads are both configured and sound."""

    step_id = StepId.THERMOSTATS_IDEAL_LOADS
    label = "4. Thermostats & Ideal Loads"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        actions = [_action("Thermostats & IdealLoads", ActionId.OPEN_IDEAL_LOADS)]
        doc = inputs.document
        configured = bool(doc.thermostats) and doc.ideal_loads.has_any

        if not configured:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "No complete thermostat/IdealLoads configuration detected. "
                "Zones may free-float or be unconstrained.",
                actions,
            )
        if inputs.diagnostics.thermostats.has_findings:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "Thermostats and IdealLoads configured, but some setpoints are "
                "missing, mismatched, or mapped to unknown zones.",
                actions + [_action("Diagnostics", ActionId.OPEN_DIAGNOSTICS)],
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.OK,
            "Thermostats and IdealLoads configured. HVAC modeled via IdealLoads.",
            actions,
        )


class WeatherLocationRule:
    """Step 5: a weather file is set and any custom location is valid."""

    step_id = StepId.WEATHER_LOCATION
    label = "5. Weather & Location"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        actions = [_action("Weather & Location", ActionId.OPEN_WEATHER_LOCATION)]
        weather = inputs.document.weather

        if not inputs.has_weather_file:
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "No EPW selected. Annual/design-day simulations cannot run "
                "reliably without a project EPW.",
                actions,
            )

        is_custom = weather.location_source == LocationSource.CUSTOM
        if is_custom and not (
            weather.custom_location is not None and weather.custom_location.is_valid()
        ):
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "Custom location selected but fields are incomplete or invalid.",
                actions,
            )

        return _step(
            self.step_id,
            self.label,
            StepStatus.OK,
            "EPW set and custom location defined."
            if is_custom
            else "EPW set. Location derived from EPW.",
            actions,
        )


class IdfGenerationRule:
    """Step 6: the engine input file can be generated."""

    step_id = StepId.IDF_GENERATION
    label = "6. IDF Generation"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        if inputs.has_blocking_references:
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "Diagnostics report blocking issues (e.g., missing "
                "constructions/materials). Fix before generating IDF.",
                [
                    _action("Diagnostics", ActionId.OPEN_DIAGNOSTICS),
                    _action("Generate IDF", ActionId.GENERATE_IDF),
                ],
            )
        if inputs.has_schedule_or_load_findings:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "IDF can be generated, but diagnostics report warnings "
                "(e.g., schedules/loads). Review before final runs.",
                [
                    _action("Diagnostics", ActionId.OPEN_DIAGNOSTICS),
                    _action("Generate IDF", ActionId.GENERATE_IDF),
                ],
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.OK,
            "Configuration is consistent. Generate IDF from the current project.",
            [_action("Generate IDF", ActionId.GENERATE_IDF)],
        )


class RunEngineRule:
    """Step 7: a simulation can be run from this environment."""

    step_id = StepId.RUN_ENERGYPLUS
    label = "7. Run EnergyPlus"

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        if not inputs.has_weather_file:
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "Cannot run: EPW is missing. Configure in Weather & Location.",
                [_action("Weather & Location", ActionId.OPEN_WEATHER_LOCATION)],
            )

        if inputs.has_blocking_references:
            return _step(
                self.step_id,
                self.label,
                StepStatus.ERROR,
                "Cannot run safely: diagnostics report blocking IDF issues.",
                [
                    _action("Diagnostics", ActionId.OPEN_DIAGNOSTICS),
                    _action("Constructions", ActionId.OPEN_CONSTRUCTIONS),
                    _action("Materials", ActionId.OPEN_MATERIALS),
                ],
            )

        if not inputs.capabilities.can_execute:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "Simulation engine not available here. You can generate "
                "IDF/scripts but cannot run EnergyPlus directly.",
                [
                    _action("Annual", ActionId.OPEN_ANNUAL),
                    _action("Heating DD", ActionId.OPEN_HEATING_DD),
                    _action("Cooling DD", ActionId.OPEN_COOLING_DD),
                ],
            )

        actions = [
            _action("Annual Simulation", ActionId.OPEN_ANNUAL),
            _action("Heating Design Day", ActionId.OPEN_HEATING_DD),
            _action("Cooling Design Day", ActionId.OPEN_COOLING_DD),
        ]
        if inputs.has_schedule_or_load_findings:
            return _step(
                self.step_id,
                self.label,
                StepStatus.WARNING,
                "Ready to run; diagnostics report warnings to review.",
                actions,
            )
        return _step(
            self.step_id,
            self.label,
            StepStatus.OK,
            "Ready to run EnergyPlus.",
            actions,
        )


DEFAULT_RULES = (
    GeometryRule(),
    ConstructionsRule(),
    SchedulesLoadsRule(),
    ThermostatsIdealLoadsRule(),
    WeatherLocationRule(),
    IdfGenerationRule(),
    RunEngineRule(),
)

"""Simulation readiness checklist."""

from .engine import evaluate, evaluate_report
from .models import (
    ActionId,
    ReadinessInputs,
    ReadinessReport,
    ReadinessStep,
    StepAction,
    StepId,
    StepStatus,
)
from .rules import (
    DEFAULT_RULES,
    ConstructionsRule,
    GeometryRule,
    IdfGenerationRule,
    RunEngineRule,
    SchedulesLoadsRule,
    ThermostatsIdealLoadsRule,
    WeatherLocationRule,
)

__all__ = [
    "evaluate",
    "evaluate_report",
    # Models
    "ActionId",
    "ReadinessInputs",
    "ReadinessReport",
    "ReadinessStep",
    "StepAction",
    "StepId",
    "StepStatus",
    # Rules
    "DEFAULT_RULES",
    "ConstructionsRule",
    "GeometryRule",
    "IdfGenerationRule",
    "RunEngineRule",
    "SchedulesLoadsRule",
    "ThermostatsIdealLoadsRule",
    "WeatherLocationRule",
]

"""Readiness engine.

``evaluate`` turns validation diagnostics, the document, and the host's
runtime capabilities into the seven-step readiness checklist. It is a pure
function of its arguments.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from simready.application.config.loader import coerce_document, coerce_zones
from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.validators import Diagnostics
from simready.contracts.host import RuntimeCapabilities
from simready.contracts.readiness import ReadinessRule

from .models import ReadinessInputs, ReadinessReport, ReadinessStep
from .rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


def evaluate_report(
    diagnostics: Diagnostics,
    document: ConfigurationDocument | dict[str, Any] | None,
    capabilities: RuntimeCapabilities | None = None,
    zones: Iterable[Zone | dict[str, Any] | str] | None = None,
    rules: Sequence[ReadinessRule] = DEFAULT_RULES,
) -> ReadinessReport:
    """Evaluate the readiness checklist and wrap it in a report.

    Args:
        diagnostics: Output of ``validate`` for the same document
        document: The configuration document, or its raw mapping
        capabilities: Runtime capabilities; None means nothing can execute
        zones: Live zone list from the host, consulted by the geometry step
        rules: Rules to run, one per step, in checklist order

    Returns:
        ReadinessReport with one step per rule

    Raises:
        TypeError: If diagnostics is not a Diagnostics instance. This is a
            caller error, not a data error.
    """
    if not isinstance(diagnostics, Diagnostics):
        raise TypeError(
            f"evaluate() requires Diagnostics, got {type(diagnostics).__name__}"
        )

    inputs = ReadinessInputs(
        diagnostics=diagnostics,
        document=coerce_document(document),
        capabilities=capabilities or RuntimeCapabilities(),
        live_zones=tuple(coerce_zones(list(zones) if zones is not None else None)),
    )

    steps: list[ReadinessStep] = []
    for rule in rules:
        step = rule.evaluate(inputs)
        logger.debug(f"Readiness step '{step.id.value}': {step.status.value}")
        steps.append(step)
    return ReadinessReport(steps=tuple(steps))


def evaluate(
    diagnostics: Diagnostics,
    document: ConfigurationDocument | dict[str, Any] | None,
    capabilities: RuntimeCapabilities | None = None,
    zones: Iterable[Zone | dict[str, Any] | str] | None = None,
) -> list[ReadinessStep]:
    """Evaluate the seven readiness steps in checklist order.

    Example:
        >>> doc = {"constructions": [{"name": "Wall1", "layers": ["Glass_Unknown"]}]}
        >>> steps = evaluate(validate(doc, []), doc, RuntimeCapabilities())
        >>> [s.status.value for s in steps][1]
        'error'
    """
    return list(evaluate_report(diagnostics, document, capabilities, zones).steps)

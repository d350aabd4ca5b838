"""Material reference validator."""

from __future__ import annotations

import logging

from simready.application.config.schemas import is_set

from .context import ValidationContext
from .diagnostics import Finding, FindingKind

logger = logging.getLogger(__name__)


class MaterialReferenceValidator:
    """Validator for construction layer references.

    Every layer of every construction must name a builtin or user-defined
    material. Layers are checked in document order, outside to inside.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "materials"

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for i, construction in enumerate(context.document.constructions):
            for j, layer in enumerate(construction.layers):
                if not is_set(layer):
                    logger.debug(
                        f"Skipping blank layer {j} of construction '{construction.name}'"
                    )
                    continue
                if layer in context.material_names:
                    continue
                findings.append(
                    Finding(
                        kind=FindingKind.MISSING_MATERIAL,
                        subject=layer,
                        message=(
                            f"Construction '{construction.name}' references "
                            f"undefined material '{layer}'"
                        ),
                        path=f"constructions[{i}].layers[{j}]",
                    )
                )
        return findings

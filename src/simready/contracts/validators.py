"""Validator protocol for referential document validation.

This module defines the protocol that all referential validators must
implement so validate and the ValidatorRegistry can run them uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from simready.application.config.validators.context import ValidationContext
    from simready.application.config.validators.diagnostics import Finding


@runtime_checkable
class Validator(Protocol):
    """Protocol for referential validators.

    Validators check one kind of cross-reference in a document and return
    the findings in document order. They must not mutate the document.

    Attributes:
        name: Unique identifier for the validator (e.g., "materials", "loads").

    Example:
        class MyValidator:
            @property
            def name(self) -> str:
                return "my_validator"

            def validate(self, context: ValidationContext) -> list[Finding]:
                return [
                    Finding(FindingKind.MISSING_SCHEDULE, name, f"'{name}' missing")
                    for name in referenced
                    if not context.has_schedule(name)
                ]
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, context: ValidationContext) -> list[Finding]:
        """Validate the document held by the context.

        Args:
            context: The document, zone list, and derived name tables.

        Returns:
            Findings in document order.
        """
        ...

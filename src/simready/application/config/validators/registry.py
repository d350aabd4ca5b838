"""Validator registry for additional referential validators.

The built-in validators run in a fixed order owned by ``validate``. The
registry holds validators added on top of them, which run afterwards in
registration order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Collection

from .diagnostics import Finding, FindingKind

if TYPE_CHECKING:
    from simready.contracts.validators import Validator

    from .context import ValidationContext

logger = logging.getLogger(__name__)


def run_validator(validator: "Validator", context: "ValidationContext") -> list[Finding]:
    """Run one validator, turning an exception into a failure finding.

    A validator that raises does not stop validation; its failure is logged
    and reported as a single error finding in its place.
    """
    name = validator.name
    logger.debug(f"Running validator '{name}'")
    try:
        return list(validator.validate(context))
    except Exception as e:
        logger.error(f"Validator '{name}' raised an exception: {e}")
        return [
            Finding(
                kind=FindingKind.VALIDATOR_FAILURE,
                subject=name,
                message=f"Validator '{name}' failed: {str(e)}",
                path="validation",
            )
        ]


class ValidatorRegistry:
    """Registry for additional referential validators.

    The registry supports:
    - Registering validator instances
    - Enabling/disabling specific validators
    - Running all enabled validators in registration order
    - Clearing for testing purposes

    Example:
        # Register a validator
        ValidatorRegistry.register(ZoneNamingValidator())

        # Run all validators
        findings = ValidatorRegistry.run_all(context)

        # Disable a validator
        ValidatorRegistry.disable("zone-naming")
    """

    _validators: ClassVar[dict[str, "Validator"]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: "Validator") -> None:
        """Register a validator instance.

        Args:
            validator: The validator instance to register.

        Note:
            Re-registering a name replaces the validator in place, keeping
            its original position in the run order. A warning is logged.
        """
        name = validator.name
        if name in cls._validators:
            logger.warning(f"Overwriting existing validator '{name}'")
        cls._validators[name] = validator
        logger.debug(f"Registered validator '{name}': {type(validator).__name__}")

    @classmethod
    def get(cls, name: str) -> "Validator":
        """Get a validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            available = ", ".join(cls._validators.keys())
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {available or 'none'}"
            )
        return cls._validators[name]

    @classmethod
    def available(cls) -> list[str]:
        """Get registered validator names in run order."""
        return list(cls._validators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        """Enable a validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        cls._disabled.discard(name)
        logger.debug(f"Enabled validator '{name}'")

    @classmethod
    def disable(cls, name: str) -> None:
        """Disable a validator by name.

        Disabled validators are skipped by run_all().

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        cls._disabled.add(name)
        logger.debug(f"Disabled validator '{name}'")

    @classmethod
    def is_enabled(cls, name: str) -> bool:
        return name in cls._validators and name not in cls._disabled

    @classmethod
    def run_all(
        cls,
        context: "ValidationContext",
        exclude: Collection[str] = (),
    ) -> list[Finding]:
        """Run all enabled validators against a validation context.

        Args:
            context: Lookup tables for the document being validated.
            exclude: Names to skip, such as those of the built-in validators.

        Returns:
            Findings from every enabled validator, in registration order.
        """
        findings: list[Finding] = []

        for name, validator in list(cls._validators.items()):
            if name in exclude:
                logger.debug(f"Skipping validator '{name}': name is reserved")
                continue
            if name in cls._disabled:
                logger.debug(f"Skipping disabled validator '{name}'")
                continue
            findings.extend(run_validator(validator, context))

        return findings

    @classmethod
    def run_single(cls, name: str, context: "ValidationContext") -> list[Finding]:
        """Run a single validator against a validation context.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        validator = cls.get(name)
        return validator.validate(context)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered validators and disabled states.

        This is primarily useful for testing.
        """
        cls._validators.clear()
        cls._disabled.clear()

    @classmethod
    def reset_disabled(cls) -> None:
        """Reset all validators to enabled state."""
        cls._disabled.clear()

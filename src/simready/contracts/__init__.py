"""Contracts module - protocols and shared value objects across layers.

This module provides:
- The Validator protocol run by validate and the ValidatorRegistry
- The ReadinessRule protocol run by the readiness engine
- Host collaborator protocols and RuntimeCapabilities

Example:
    ```python
    from simready.contracts import RuntimeCapabilities, ZoneProvider

    def current_zones(provider: ZoneProvider) -> list:
        return provider.get_zones()
    ```
"""

from .host import (
    CapabilitiesProvider as CapabilitiesProvider,
    DocumentProvider as DocumentProvider,
    RuntimeCapabilities as RuntimeCapabilities,
    ZoneProvider as ZoneProvider,
)
from .readiness import ReadinessRule as ReadinessRule
from .validators import Validator as Validator

__all__ = [
    "CapabilitiesProvider",
    "DocumentProvider",
    "ReadinessRule",
    "RuntimeCapabilities",
    "Validator",
    "ZoneProvider",
]

"""Host collaborator contracts.

The validation and readiness core never fetches anything itself. The host
application supplies the zone list, the current document, and what the
runtime environment can do, through these protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from simready.application.config.schemas import ConfigurationDocument, Zone


@dataclass(frozen=True)
class RuntimeCapabilities:
    """What the host can do with a generated model.

    Attributes:
        can_execute: Whether the external simulation engine can be launched
            from the current environment.
        engine_path: Location of the engine executable, when known.
    """

    can_execute: bool = False
    engine_path: str | None = None


@runtime_checkable
class ZoneProvider(Protocol):
    """Supplies the geometry-derived zone list. May be empty."""

    def get_zones(self) -> list[Zone]:
        ...


@runtime_checkable
class DocumentProvider(Protocol):
    """Supplies a read-only snapshot of the current configuration document."""

    def get_configuration_document(self) -> ConfigurationDocument:
        ...


@runtime_checkable
class CapabilitiesProvider(Protocol):
    """Reports the runtime capabilities of the host environment."""

    def get_runtime_capabilities(self) -> RuntimeCapabilities:
        ...

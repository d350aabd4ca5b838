"""FastAPI dependency injection for host collaborators."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from simready.contracts.host import CapabilitiesProvider
from simready.infrastructure.runtime import EnvironmentCapabilitiesProvider


@lru_cache(maxsize=1)
def get_capabilities_provider() -> CapabilitiesProvider:
    """Get the cached provider probing the server environment."""
    return EnvironmentCapabilitiesProvider()


# Type aliases for cleaner endpoint signatures
CapabilitiesProviderDep = Annotated[
    CapabilitiesProvider, Depends(get_capabilities_provider)
]

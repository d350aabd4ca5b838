"""Infrastructure layer - host environment concerns."""

from .runtime import (
    DEFAULT_ENGINE_EXECUTABLE,
    ENGINE_PATH_ENV,
    EnvironmentCapabilitiesProvider,
    detect_runtime_capabilities,
    find_engine,
)

__all__ = [
    "DEFAULT_ENGINE_EXECUTABLE",
    "ENGINE_PATH_ENV",
    "EnvironmentCapabilitiesProvider",
    "detect_runtime_capabilities",
    "find_engine",
]

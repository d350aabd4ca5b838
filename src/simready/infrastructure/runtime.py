"""Runtime capability detection for the external simulation engine.

Only the location of the engine executable is checked. Nothing is run.
"""

import logging
import os
import shutil
from pathlib import Path

from simready.contracts.host import RuntimeCapabilities

logger = logging.getLogger(__name__)

# Environment variable naming the engine executable
ENGINE_PATH_ENV = "SIMREADY_ENGINE_PATH"

# Executable looked up on PATH when no location is configured
DEFAULT_ENGINE_EXECUTABLE = "energyplus"


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_engine(engine_path: str | Path | None = None) -> Path | None:
    """Locate the simulation engine executable.

    The explicit argument wins, then ``SIMREADY_ENGINE_PATH``, then a PATH
    lookup. An explicitly configured location that is missing or not
    executable is reported and is not replaced by the PATH lookup.

    Args:
        engine_path: Executable path, or a directory containing it

    Returns:
        Path to an executable engine, or None if none was found
    """
    configured = engine_path or os.environ.get(ENGINE_PATH_ENV)
    if configured:
        candidate = Path(configured).expanduser()
        if candidate.is_dir():
            candidate = candidate / DEFAULT_ENGINE_EXECUTABLE
        if _is_executable(candidate):
            return candidate
        logger.warning(f"Configured simulation engine is not executable: {candidate}")
        return None

    found = shutil.which(DEFAULT_ENGINE_EXECUTABLE)
    if found is None:
        logger.debug(f"'{DEFAULT_ENGINE_EXECUTABLE}' not found on PATH")
        return None
    return Path(found)


def detect_runtime_capabilities(
    engine_path: str | Path | None = None,
) -> RuntimeCapabilities:
    """Report whether the simulation engine can be launched from here."""
    engine = find_engine(engine_path)
    return RuntimeCapabilities(
        can_execute=engine is not None,
        engine_path=str(engine) if engine is not None else None,
    )


class EnvironmentCapabilitiesProvider:
    """CapabilitiesProvider backed by ``detect_runtime_capabilities``."""

    def __init__(self, engine_path: str | Path | None = None) -> None:
        self._engine_path = engine_path

    def get_runtime_capabilities(self) -> RuntimeCapabilities:
        return detect_runtime_capabilities(self._engine_path)

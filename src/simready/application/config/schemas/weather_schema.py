"""Weather file and site location schemas.

Custom location fields are deliberately unconstrained here. Range checks
happen in the readiness engine so an out-of-range latitude surfaces as a
Weather & Location error instead of failing the whole document.
"""

import math

from simready.application.config.schemas.base import (
    DocumentModel,
    LocationSource,
    is_set,
)


class CustomLocation(DocumentModel):
    """User-entered site location, used when the source is Custom."""

    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    time_zone: float | None = None
    elevation: float | None = None

    def is_valid(self) -> bool:
        """Check that every field is present and within its physical range."""
        if not is_set(self.name):
            return False
        if not _in_range(self.latitude, -90.0, 90.0):
            return False
        if not _in_range(self.longitude, -180.0, 180.0):
            return False
        if not _in_range(self.time_zone, -12.0, 14.0):
            return False
        return self.elevation is not None and math.isfinite(self.elevation)


def _in_range(value: float | None, low: float, high: float) -> bool:
    return value is not None and math.isfinite(value) and low <= value <= high


class WeatherConfig(DocumentModel):
    """Weather file selection and location source."""

    epw_path: str | None = None
    location_source: LocationSource = LocationSource.FROM_EPW
    custom_location: CustomLocation | None = None

"""Schedule schemas.

Schedules come in six kinds, each kept in its own list and keyed by name
within that list. Names are not required to be unique across kinds.
"""

from typing import Iterator

from pydantic import Field, field_validator

from simready.application.config.schemas.base import DocumentModel, ScheduleKind


class ScheduleTypeLimits(DocumentModel):
    """Bounds and unit type shared by value schedules."""

    name: str = Field(..., min_length=1)
    lower_limit: float | None = None
    upper_limit: float | None = None
    numeric_type: str | None = None
    unit_type: str | None = None

    @field_validator("lower_limit", "upper_limit", mode="before")
    @classmethod
    def blank_limit_is_unset(cls, v: object) -> object:
        """The host stores cleared limit inputs as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class DayHourlySchedule(DocumentModel):
    """One day profile with one value per hour."""

    name: str = Field(..., min_length=1)
    type_limits: str | None = None
    values: list[float] = Field(..., min_length=24, max_length=24)


class CompactSchedule(DocumentModel):
    """Schedule written in the compact directive language.

    The raw line sequence is the persisted form; the structured row view is
    produced on demand by ``simready.application.schedules.compact``.
    """

    name: str = Field(..., min_length=1)
    type_limits: str | None = None
    lines: list[str] = Field(default_factory=list)


class ConstantSchedule(DocumentModel):
    """Schedule with a single constant value."""

    name: str = Field(..., min_length=1)
    type_limits: str | None = None
    value: float = 0.0


class FileSchedule(DocumentModel):
    """Schedule read from a column of an external CSV file."""

    name: str = Field(..., min_length=1)
    type_limits: str | None = None
    file_name: str = ""
    column_number: int = Field(default=1, ge=1)
    rows_to_skip: int = Field(default=0, ge=0)
    hours_of_data: int = Field(default=8760, ge=1)
    column_separator: str = "Comma"
    interpolate: str = "No"
    minutes_per_item: int = Field(default=60, ge=1, le=60)
    adjust_dst: str = Field(default="No", alias="adjustDST")


class FileShadingSchedule(DocumentModel):
    """Shading fraction schedules read from an external file."""

    name: str = Field(..., min_length=1)
    file_name: str = ""


class Schedules(DocumentModel):
    """All schedule definitions of a document, grouped by kind."""

    type_limits: list[ScheduleTypeLimits] = Field(default_factory=list)
    day_hourly: list[DayHourlySchedule] = Field(default_factory=list)
    compact: list[CompactSchedule] = Field(default_factory=list)
    constant: list[ConstantSchedule] = Field(default_factory=list)
    file: list[FileSchedule] = Field(default_factory=list)
    file_shading: list[FileShadingSchedule] = Field(default_factory=list)

    def by_kind(self) -> Iterator[tuple[ScheduleKind, list[DocumentModel]]]:
        """Yield each schedule kind with its entries, in a fixed order."""
        yield ScheduleKind.TYPE_LIMITS, self.type_limits
        yield ScheduleKind.DAY_HOURLY, self.day_hourly
        yield ScheduleKind.COMPACT, self.compact
        yield ScheduleKind.CONSTANT, self.constant
        yield ScheduleKind.FILE, self.file
        yield ScheduleKind.FILE_SHADING, self.file_shading

    def all_names(self) -> set[str]:
        """Return every schedule name regardless of kind."""
        return {entry.name for _, entries in self.by_kind() for entry in entries}

    def sorted_names(self) -> list[str]:
        """Return every distinct schedule name, sorted, for schedule pickers."""
        return sorted(self.all_names())

    def count(self) -> int:
        """Total number of schedule entries across all kinds."""
        return sum(len(entries) for _, entries in self.by_kind())

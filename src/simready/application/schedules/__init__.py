"""Schedule editing helpers."""

from simready.application.schedules.compact import (
    CompactRow,
    ForRow,
    InterpolateRow,
    ThroughRow,
    UnknownRow,
    UntilRow,
    compact_rows_adapter,
    default_rows,
    normalize_until_time,
    parse_compact,
    parse_compact_text,
    serialize_compact,
)

__all__ = [
    "CompactRow",
    "ForRow",
    "InterpolateRow",
    "ThroughRow",
    "UnknownRow",
    "UntilRow",
    "compact_rows_adapter",
    "default_rows",
    "normalize_until_time",
    "parse_compact",
    "parse_compact_text",
    "serialize_compact",
]

"""Compact schedule line codec.

A compact schedule is persisted as an ordered list of directive lines::

    Through: 12/31
    For: Weekdays
    Until: 08:00, 0
    Until: 18:00, 1
    For: AllOtherDays
    Until: 24:00, 0

``parse_compact`` turns those lines into typed rows for editing and
``serialize_compact`` writes edited rows back. Both are total. Lines with an
unrecognised directive become ``UnknownRow`` entries holding the trimmed
line, and are written back under a generic ``Unknown:`` prefix, so that
category does not round-trip to its original text.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

logger = logging.getLogger(__name__)


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = ""


class ThroughRow(_Row):
    """End date of a period, e.g. ``12/31``."""

    type: Literal["Through"] = "Through"


class ForRow(_Row):
    """Day types covered by the following Until rows, e.g. ``Weekdays``."""

    type: Literal["For"] = "For"


class InterpolateRow(_Row):
    """Interpolation mode for the current day block."""

    type: Literal["Interpolate"] = "Interpolate"


class UntilRow(_Row):
    """Value in effect until ``time``."""

    type: Literal["Until"] = "Until"
    time: str = ""


class UnknownRow(_Row):
    """Unrecognised directive, kept as its trimmed line."""

    type: Literal["Unknown"] = "Unknown"


CompactRow = Annotated[
    Union[ThroughRow, ForRow, InterpolateRow, UntilRow, UnknownRow],
    Field(discriminator="type"),
]

compact_rows_adapter: TypeAdapter[list[CompactRow]] = TypeAdapter(list[CompactRow])

# Directive keywords, matched case-insensitively with the colon included
_KEYWORD_ROWS: tuple[tuple[str, type[_Row]], ...] = (
    ("through:", ThroughRow),
    ("for:", ForRow),
    ("interpolate:", InterpolateRow),
)
_UNTIL = "until:"


def default_rows() -> list[CompactRow]:
    """Rows for a new, empty compact schedule: all year, all days, zero."""
    return [
        ThroughRow(value="12/31"),
        ForRow(value="AllDays"),
        UntilRow(time="24:00", value="0"),
    ]


def _parse_line(line: str) -> CompactRow:
    lowered = line.lower()
    for keyword, row_type in _KEYWORD_ROWS:
        if lowered.startswith(keyword):
            return row_type(value=line[len(keyword):].strip())
    if lowered.startswith(_UNTIL):
        time, _, value = line[len(_UNTIL):].partition(",")
        return UntilRow(time=time.strip(), value=value.strip())
    return UnknownRow(value=line)


def parse_compact(lines: Iterable[Any] | None) -> list[CompactRow]:
    """Parse compact directive lines into rows.

    Blank lines are skipped. ``None`` entries are ignored and other
    non-string entries are parsed from their string form. When nothing is
    left, the default three-row scaffold from ``default_rows`` is returned;
    this is the only case where output is not derived from the input.

    Args:
        lines: Raw directive lines, in order

    Returns:
        One row per non-blank line, in input order
    """
    rows: list[CompactRow] = []
    for raw in lines or ():
        if raw is None:
            continue
        line = raw if isinstance(raw, str) else str(raw)
        line = line.strip()
        if not line:
            continue
        rows.append(_parse_line(line))

    if not rows:
        logger.debug("Compact schedule is empty; using default rows")
        return default_rows()
    return rows


def parse_compact_text(text: str | None) -> list[CompactRow]:
    """Parse a block of compact schedule text, one directive per line."""
    return parse_compact((text or "").splitlines())


def normalize_until_time(time: str) -> str:
    """Write a bare hour such as ``17`` as ``17:00``; leave anything else."""
    time = time.strip()
    if time.isdigit():
        return f"{time}:00"
    return time


def serialize_compact(rows: Iterable[CompactRow]) -> list[str]:
    """Write rows back to compact directive lines.

    Row order is kept. An Until row without a time and any other row
    without a value produce no line.
    """
    lines: list[str] = []
    for row in rows:
        if isinstance(row, UntilRow):
            time = normalize_until_time(row.time)
            if time:
                lines.append(f"Until: {time}, {row.value.strip()}")
            continue
        value = row.value.strip()
        if value:
            lines.append(f"{row.type}: {value}")
    return lines

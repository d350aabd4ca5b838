"""Configuration document loader with comprehensive error handling.

This module loads configuration documents and zone lists from JSON. Two
modes are offered:

- strict (``load_document``, ``load_document_from_dict``): any schema
  violation raises ``ConfigError`` with one detail per pydantic error.
- lenient (``coerce_document``, ``coerce_zones``): bad fields, and entries
  or sections that cannot be kept, are dropped one at a time, each with a
  logged warning, until the remainder validates. This is what keeps
  referential validation total on whatever the host hands over.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel, to_snake

from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.schemas.geometry_schema import flatten_zone_totals

logger = logging.getLogger(__name__)

# Upper bound on prune-and-retry passes for a single lenient load
MAX_COERCION_PASSES = 1000

# Fields that name an entry; a bad value here drops the whole entry
IDENTITY_FIELDS = frozenset(
    {"name", "kind", "type", "zone_name", "air_loop_name", "plant_loop_name"}
)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the input file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("defaults", "wallConstruction"))
        'defaults.wallConstruction'
        >>> _format_json_path(("constructions", 0, "layers", 2))
        'constructions[0].layers[2]'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract and format validation errors from a Pydantic ValidationError.

    Returns:
        List of error dictionaries with path, message, value, and error_type
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        path = _format_json_path(err["loc"])
        details.append(
            {
                "path": path,
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path, label: str) -> Any:
    """Read and parse a JSON file, mapping failures to ConfigError."""
    if not path.exists():
        raise ConfigError(
            message=f"{label} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {label.lower()} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {label.lower()} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in {label.lower()} file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def load_document_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> ConfigurationDocument:
    """Validate a configuration document from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return ConfigurationDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_document(path: Path, strict: bool = True) -> ConfigurationDocument:
    """Load a configuration document from a JSON file.

    Args:
        path: Path to the JSON document
        strict: Raise on schema violations instead of dropping the
            offending entries

    Returns:
        A ConfigurationDocument instance

    Raises:
        ConfigError: If the file cannot be read or parsed, or (in strict
            mode) does not match the schema. The error_type attribute
            indicates the category.

    Example:
        >>> try:
        ...     doc = load_document(Path("project.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = _read_json(path, "Document")
    if not strict:
        return coerce_document(data)
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Document root must be a JSON object: {path}",
            error_type="validation",
            path=path,
        )
    return load_document_from_dict(data, path=path)


def load_zones(path: Path) -> list[Zone]:
    """Load a zone list from a JSON file.

    The file holds either a list of zones or an object with a ``zones``
    list. Malformed zone entries are skipped with a warning.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    data = _read_json(path, "Zones")
    if isinstance(data, dict):
        data = data.get("zones", [])
    return coerce_zones(data)


def _key_variants(key: str) -> tuple[str, ...]:
    return (key, to_camel(key), to_snake(key))


def _find_key(node: dict[str, Any], segment: str) -> str | None:
    return next((k for k in _key_variants(segment) if k in node), None)


def _locate(data: Any, loc: tuple[str | int, ...]) -> list[tuple[Any, str | int]]:
    """Follow an error location into raw data as far as it exists.

    A segment with no raw counterpart is skipped when the segment after it
    resolves, which steps over union tags such as ``Opaque``. Any other
    unresolved segment (a missing key) ends the walk.

    Returns:
        (container, key) pairs for every segment that was found
    """
    steps: list[tuple[Any, str | int]] = []
    node = data
    segments = list(loc)
    i = 0
    while i < len(segments):
        segment = segments[i]
        if isinstance(node, list) and isinstance(segment, int):
            if not 0 <= segment < len(node):
                break
            steps.append((node, segment))
            node = node[segment]
        elif isinstance(node, dict) and isinstance(segment, str):
            key = _find_key(node, segment)
            if key is None:
                following = segments[i + 1] if i + 1 < len(segments) else None
                if isinstance(following, str) and _find_key(node, following):
                    i += 1
                    continue
                break
            steps.append((node, key))
            node = node[key]
        else:
            break
        i += 1
    return steps


def _is_identity_field(key: str | int) -> bool:
    return isinstance(key, str) and to_snake(key) in IDENTITY_FIELDS


def _prune(data: dict[str, Any], loc: tuple[str | int, ...]) -> str | None:
    """Remove the raw value responsible for an error.

    Inside a list entry only the failing field is removed, so an entry with
    one bad property keeps its name and stays resolvable. The whole entry is
    removed when its identity is at fault: a bad name or kind, a value that
    is not an object, or a required field that is missing. Outside lists
    the innermost value that exists is removed.

    Returns:
        The JSON path of the removed value, or None if nothing was removed
    """
    steps = _locate(data, loc)
    if not steps:
        return None

    target = len(steps) - 1
    entry = next(
        (i for i in range(len(steps) - 1, -1, -1) if isinstance(steps[i][1], int)),
        None,
    )
    if entry is not None and (
        target == entry
        or any(_is_identity_field(key) for _, key in steps[entry + 1 :])
    ):
        target = entry

    container, key = steps[target]
    del container[key]
    return _format_json_path(tuple(k for _, k in steps[: target + 1]))


def coerce_document(data: Any) -> ConfigurationDocument:
    """Build a ConfigurationDocument from untrusted data without raising.

    Invalid fields, entries and sections are pruned one error at a time,
    each with a logged warning, and validation is retried on what is left.
    ``None`` or a non-object root yields an empty document.

    Args:
        data: Parsed JSON (or an already-built document)

    Returns:
        The largest valid document obtainable by removing bad values
    """
    if isinstance(data, ConfigurationDocument):
        return data
    if data is None:
        return ConfigurationDocument()
    if not isinstance(data, dict):
        logger.warning(
            f"Ignoring configuration document of type {type(data).__name__}"
        )
        return ConfigurationDocument()

    working = copy.deepcopy(data)
    for _ in range(MAX_COERCION_PASSES):
        try:
            return ConfigurationDocument.model_validate(working)
        except PydanticValidationError as e:
            err = e.errors()[0]
            removed = _prune(working, err["loc"])
            if removed is None:
                logger.warning(
                    f"Unrecoverable document error at "
                    f"'{_format_json_path(err['loc'])}': {err['msg']}; "
                    "using an empty document"
                )
                return ConfigurationDocument()
            logger.warning(f"Dropped invalid document value '{removed}': {err['msg']}")

    logger.warning("Document could not be repaired; using an empty document")
    return ConfigurationDocument()


def _coerce_zone(entry: dict[str, Any], index: int) -> Zone | None:
    """Validate one raw zone, stripping bad optional fields.

    Returns None when the zone name itself is missing or invalid.
    """
    working = flatten_zone_totals(entry)
    while True:
        try:
            return Zone.model_validate(working)
        except PydanticValidationError as e:
            err = e.errors()[0]
            steps = _locate(working, err["loc"][:1])
            if not steps or _is_identity_field(steps[0][1]):
                logger.warning(f"Skipping invalid zone at index {index}: {err['msg']}")
                return None
            field = steps[0][1]
            del working[field]
            logger.warning(
                f"Dropped invalid field '{field}' of zone at index {index}: {err['msg']}"
            )


def coerce_zones(raw: Any) -> list[Zone]:
    """Build a zone list from untrusted data without raising.

    Accepts Zone models, mappings, and bare zone-name strings. A mapping
    with a bad count or area keeps its name and loses only that field. A
    mapping without a valid name, and anything else, is skipped with a
    warning.
    """
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.warning(f"Ignoring zone list of type {type(raw).__name__}")
        return []

    zones: list[Zone] = []
    for i, entry in enumerate(raw):
        if isinstance(entry, Zone):
            zones.append(entry)
        elif isinstance(entry, str) and entry.strip():
            zones.append(Zone(name=entry))
        elif isinstance(entry, dict):
            zone = _coerce_zone(entry, i)
            if zone is not None:
                zones.append(zone)
        else:
            logger.warning(f"Skipping zone at index {i} of type {type(entry).__name__}")
    return zones

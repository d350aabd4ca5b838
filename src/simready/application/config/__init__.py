"""Configuration document schema, loading, and referential validation.

Public API:
    - ConfigurationDocument: Root document model
    - Zone: Zone summary supplied by the geometry model
    - load_document: Load a document from a JSON file
    - load_document_from_dict: Validate a document from a dictionary
    - load_zones: Load a zone list from a JSON file
    - coerce_document: Lenient document construction that never raises
    - coerce_zones: Lenient zone list construction that never raises
    - ConfigError: Exception for loading errors
    - validate: Cross-validate a document against a zone list
    - Diagnostics: Result of validate
    - check_document_integrity: Duplicate name checks
    - check_material_deletion: Guard for deleting a material
    - check_construction_deletion: Guard for deleting a construction

Example:
    >>> from pathlib import Path
    >>> from simready.application.config import load_document, validate, ConfigError
    >>>
    >>> try:
    ...     doc = load_document(Path("project.json"))
    ...     print(validate(doc, []).issues)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from simready.application.config.loader import (
    ConfigError,
    coerce_document,
    coerce_zones,
    load_document,
    load_document_from_dict,
    load_zones,
)
from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.validator import (
    check_construction_deletion,
    check_document_integrity,
    check_material_deletion,
    summarize_geometry,
    validate,
)
from simready.application.config.validators import (
    Diagnostics,
    IntegrityError,
    IntegrityResult,
    IntegrityWarning,
    Issue,
    Severity,
)

__all__ = [
    # Loader
    "ConfigError",
    "coerce_document",
    "coerce_zones",
    "load_document",
    "load_document_from_dict",
    "load_zones",
    # Schemas
    "ConfigurationDocument",
    "Zone",
    # Validation
    "Diagnostics",
    "IntegrityError",
    "IntegrityResult",
    "IntegrityWarning",
    "Issue",
    "Severity",
    "check_construction_deletion",
    "check_document_integrity",
    "check_material_deletion",
    "summarize_geometry",
    "validate",
]

"""Result types for document integrity checks and deletion guards.

Duplicate names and deletions that would leave a dangling reference are
edit-time problems with a single location in the document, so they are
collected as flat error and warning lists. Referential findings use the
``Diagnostics`` model in ``diagnostics.py`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IntegrityError:
    """A problem that blocks the edit or the document.

    Attributes:
        path: Dotted path to the offending entry (e.g., "constructions[1].name")
        message: Human-readable description of the problem
        name: The entity name involved, such as the duplicated or in-use name
    """

    path: str
    message: str
    name: str | None = None


@dataclass
class IntegrityWarning:
    """A problem the host may proceed past.

    Attributes:
        path: Dotted path to the concerning entry
        message: Human-readable description of the concern
        suggestion: How to clear the warning, if there is a single fix
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class IntegrityResult:
    """Errors and warnings from one integrity check or deletion guard."""

    errors: list[IntegrityError] = field(default_factory=list)
    warnings: list[IntegrityWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks the document or the deletion."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, name: str | None = None) -> None:
        self.errors.append(IntegrityError(path=path, message=message, name=name))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(
            IntegrityWarning(path=path, message=message, suggestion=suggestion)
        )

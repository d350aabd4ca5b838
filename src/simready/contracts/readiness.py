"""Readiness rule protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from simready.application.readiness.models import ReadinessInputs, ReadinessStep


@runtime_checkable
class ReadinessRule(Protocol):
    """One step of the readiness checklist.

    A rule is a stateless decision over the readiness inputs. It always
    returns a step with at least one action.
    """

    @property
    def step_id(self) -> str:
        """Return the stable identifier of the step this rule produces."""
        ...

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessStep:
        """Decide the status, description, and actions for the step."""
        ...

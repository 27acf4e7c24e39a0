"""Stateful traversal over a stepper's ordered steps."""

from typing import TYPE_CHECKING

from ..models import Step

if TYPE_CHECKING:
    from .stepper import Stepper


class StepCursor:
    """Forward/backward pointer over the computed step order.

    The pointer is independent of the stepper's current step. Moving past
    either end leaves the cursor invalid until the next rewind.
    """

    def __init__(self, stepper: "Stepper") -> None:
        self._stepper = stepper
        self._index: int | None = 0

    def _at(self, index: int | None) -> Step | None:
        # Reads the list as is; public methods compute first.
        steps = self._stepper._steps
        if index is not None and 0 <= index < len(steps):
            return steps[index]
        return None

    def _reset(self) -> None:
        # Called by the stepper mid-recompute, so it must not compute.
        self._index = 0

    def _move(self, offset: int) -> Step | None:
        self._stepper.ensure_computed()
        if self._index is None:
            return None
        self._index += offset
        step = self._at(self._index)
        if step is None:
            self._index = None
        return step

    def rewind(self) -> Step | None:
        """Move to the first step and return it."""
        self._stepper.ensure_computed()
        self._index = 0
        return self._at(self._index)

    def current(self) -> Step | None:
        self._stepper.ensure_computed()
        return self._at(self._index)

    def key(self) -> int | None:
        """Index under the cursor, or None when invalid."""
        if self.valid():
            return self._index
        return None

    def next(self) -> Step | None:
        """Advance and return the step now under the cursor."""
        return self._move(1)

    def prev(self) -> Step | None:
        """Retreat and return the step now under the cursor."""
        return self._move(-1)

    def valid(self) -> bool:
        self._stepper.ensure_computed()
        return self._at(self._index) is not None

    def __repr__(self) -> str:
        return f"StepCursor(index={self._index})"

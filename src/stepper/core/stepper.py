"""Step collection and status computation.

The stepper keeps its steps in insertion order until something reads
from it. The first read after a mutation runs a recompute pass that
sorts steps by position, locates the current step by name, and derives
the first/last/current/passed flags. Later reads reuse that result until
the next mutation.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..config import StepperConfig
from ..errors import InvalidFieldError, MissingRequiredFieldError
from ..models import Step, get_step_type
from ..rendering import render_template
from .cursor import StepCursor

logger = logging.getLogger(__name__)

StepFactory = Callable[[str], Step]

_position_adapter = TypeAdapter(int)


def _type_factory(step_type: type[Step]) -> StepFactory:
    def build(name: str) -> Step:
        return step_type(name=name)

    return build


class Stepper:
    """Ordered, named steps with current-step tracking.

    Subclasses declare their steps by overriding ``register``, which runs
    at construction time.

    Args:
        config: Stepper settings (default step name, step type, template)
        step_factory: Builds a step from a name. Defaults to the step type
            selected by ``config.step_type``.

    Example:
        >>> stepper = Stepper()
        >>> for name in ("cart", "shipping", "payment"):
        ...     _ = stepper.add_step(name)
        >>> stepper.set_current_step_name("shipping")
        >>> stepper.get_prev_step().name
        'cart'
    """

    def __init__(
        self,
        config: StepperConfig | None = None,
        step_factory: StepFactory | None = None,
    ) -> None:
        self.config = config or StepperConfig()
        if step_factory is None:
            step_factory = _type_factory(get_step_type(self.config.step_type))
        self._step_factory = step_factory
        self._steps: list[Step] = []
        self._current_step_name: str | None = None
        self._current_index: int | None = None
        self._dirty = False
        self.cursor = StepCursor(self)
        self.register()

    def register(self) -> None:
        """Declare the steps of this stepper. Override in subclasses."""

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_step(self, name: str) -> Step:
        """Create a step at the end of the stepper.

        The step's position is the number of steps before it plus one. It
        can be changed before the next read; call ``invalidate`` if the
        stepper was already read since.
        """
        step = self._step_factory(name)
        step.position = len(self._steps) + 1
        self._steps.append(step)
        self.invalidate()
        return step

    def add_steps_from_records(self, records: Sequence[Mapping[str, Any]]) -> "Stepper":
        """Add steps from mappings holding a ``name`` and optional ``position``.

        Records are added in order. The first invalid record stops the
        batch; records before it stay added.

        Raises:
            MissingRequiredFieldError: If a record has no name
            InvalidFieldError: If a position is not a whole number
        """
        for index, record in enumerate(records):
            if record.get("name") is None:
                logger.debug(f"Record {index} has no name, aborting batch")
                raise MissingRequiredFieldError("name", index)
            position = record.get("position")
            if position is not None:
                try:
                    position = _position_adapter.validate_python(position)
                except ValidationError:
                    logger.debug(f"Record {index} has invalid position {position!r}")
                    raise InvalidFieldError("position", index, position) from None
            step = self.add_step(record["name"])
            if position is not None:
                step.position = position
        return self

    def set_current_step_name(self, name: str) -> None:
        self._current_step_name = name
        self.invalidate()

    def get_current_step_name(self) -> str:
        """Name of the current step, falling back to the default step name."""
        if self._current_step_name is None:
            self._current_step_name = self.config.default_step_name
        return self._current_step_name

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark computed state stale so the next read recomputes."""
        self._dirty = True

    def ensure_computed(self) -> None:
        if self._dirty:
            self.recompute()

    def recompute(self) -> bool:
        """Sort steps and derive their status flags.

        Returns:
            True if a pass ran, False if nothing changed since the last one
        """
        if not self._dirty:
            return False

        self._sort_steps()
        self._compute_current_step()
        self._compute_steps()
        self._dirty = False

        logger.debug(
            f"Computed {len(self._steps)} steps, current={self._current_step_name!r} "
            f"at index {self._current_index}"
        )
        return True

    def _sort_steps(self) -> None:
        # list.sort is stable, so equal positions keep insertion order
        self._steps.sort(key=lambda step: step.position)

    def _compute_current_step(self) -> None:
        current_name = self.get_current_step_name()
        self._current_index = None
        for step in self._steps:
            step.reset_status()
        for i, step in enumerate(self._steps):
            if step.name == current_name:
                step.set_current()
                self._current_index = i
                self.cursor._reset()
                break

    def _compute_steps(self) -> None:
        last = len(self._steps) - 1
        for i, step in enumerate(self._steps):
            step.set_first(i == 0)
            step.set_last(i == last)
            step.set_passed(self._current_index is not None and i < self._current_index)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def count(self) -> int:
        self.ensure_computed()
        return len(self._steps)

    def step_exists(self, name: str) -> bool:
        return self.get_step(name) is not None

    def get_step(self, name: str) -> Step | None:
        """First step with the given name, or None.

        A match rewinds the cursor.
        """
        self.ensure_computed()
        for step in self._steps:
            if step.name == name:
                self.cursor._reset()
                return step
        return None

    def _step_at_offset(self, offset: int) -> Step | None:
        self.ensure_computed()
        if self._current_index is None:
            return None
        return self[self._current_index + offset]

    def get_prev_step(self) -> Step | None:
        return self._step_at_offset(-1)

    def get_current_step(self) -> Step | None:
        return self._step_at_offset(0)

    def get_next_step(self) -> Step | None:
        return self._step_at_offset(1)

    def get_default_step(self) -> Step | None:
        """Make the default step current and return it."""
        self.set_current_step_name(self.config.default_step_name)
        return self.get_current_step()

    @property
    def steps(self) -> list[Step]:
        """Computed steps in sorted order."""
        self.ensure_computed()
        return list(self._steps)

    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]

    def render(self, extra_data: Mapping[str, Any] | None = None) -> Any:
        """Render the configured template with this stepper in its context.

        The ``stepper`` key always refers to this stepper, even if
        extra_data holds one.
        """
        self.ensure_computed()
        context = {**(extra_data or {}), "stepper": self}
        return render_template(self.config.template, context)

    # ------------------------------------------------------------------
    # Index access
    # ------------------------------------------------------------------

    def has_index(self, index: int) -> bool:
        self.ensure_computed()
        return 0 <= index < len(self._steps)

    def __getitem__(self, index: int) -> Step | None:
        if self.has_index(index):
            return self._steps[index]
        return None

    def __setitem__(self, index: int, step: Step) -> None:
        if self.has_index(index):
            self._steps[index] = step
        else:
            self._steps.append(step)
        self.invalidate()

    def __delitem__(self, index: int) -> None:
        if self.has_index(index):
            del self._steps[index]
            self.invalidate()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.step_exists(name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(steps={[s.name for s in self._steps]!r}, "
            f"current={self._current_step_name!r})"
        )

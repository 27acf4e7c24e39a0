"""Step models for stepper collections.

A step is one stage of a wizard flow. It carries its name, a sort
position, and the status flags derived by the owning stepper on every
recompute pass.
"""

from pydantic import BaseModel, Field


class Step(BaseModel):
    """Single stage of a stepper.

    Flags are owned by the stepper: they are reset and re-derived on each
    recompute, so values set by hand only last until the next pass.

    Attributes:
        name: Identifier of the step within its stepper.
        position: Sort key (1-indexed insertion order unless overridden).
        is_first: True for the first step in sorted order.
        is_last: True for the last step in sorted order.
        is_current: True for the step matching the current step name.
        is_passed: True for steps sorted before the current step.

    Example:
        >>> step = Step(name="shipping", position=2)
        >>> step.set_current()
        >>> step.status
        'current'
    """

    name: str = Field(description="Step name, unique within a stepper")
    position: int = Field(default=0, description="Sort key (1-indexed)")
    is_first: bool = Field(default=False, description="First step in sorted order")
    is_last: bool = Field(default=False, description="Last step in sorted order")
    is_current: bool = Field(default=False, description="Matches the current step name")
    is_passed: bool = Field(default=False, description="Sorted before the current step")

    def set_first(self, value: bool = True) -> None:
        self.is_first = value

    def set_last(self, value: bool = True) -> None:
        self.is_last = value

    def set_current(self, value: bool = True) -> None:
        self.is_current = value

    def set_passed(self, value: bool = True) -> None:
        self.is_passed = value

    def reset_status(self) -> None:
        """Clear all status flags."""
        self.is_first = False
        self.is_last = False
        self.is_current = False
        self.is_passed = False

    @property
    def status(self) -> str:
        """Progress status used by templates: current, passed or upcoming."""
        if self.is_current:
            return "current"
        if self.is_passed:
            return "passed"
        return "upcoming"


class LabeledStep(Step):
    """Step with a human-readable label for display."""

    label: str | None = Field(default=None, description="Display label")

    @property
    def display_label(self) -> str:
        """Label, or the name title-cased when no label was given."""
        if self.label:
            return self.label
        return self.name.replace("_", " ").replace("-", " ").title()

"""Pydantic step models and the step-type registry.

This package defines the step types a stepper can hold:
- Plain steps with name, position and status flags (Step)
- Steps with a display label (LabeledStep)

Concrete step types are looked up by name so a config file can select
which type a stepper instantiates.

Example:
    >>> from stepper.models import get_step_type
    >>> get_step_type("labeled")(name="review").display_label
    'Review'
"""

from ..errors import UnknownStepTypeError
from .step import LabeledStep, Step

STEP_TYPES: dict[str, type[Step]] = {
    "default": Step,
    "labeled": LabeledStep,
}


def register_step_type(name: str, step_type: type[Step]) -> None:
    """Register a concrete step type under a config name.

    Args:
        name: Name used by ``StepperConfig.step_type``
        step_type: Step subclass to instantiate

    Raises:
        TypeError: If step_type is not a Step subclass
    """
    if not (isinstance(step_type, type) and issubclass(step_type, Step)):
        raise TypeError(f"Step type must subclass Step, got {step_type!r}")
    STEP_TYPES[name] = step_type


def get_step_type(name: str) -> type[Step]:
    """Get a registered step type by name.

    Raises:
        UnknownStepTypeError: If no step type is registered under name
    """
    try:
        return STEP_TYPES[name]
    except KeyError:
        known = ", ".join(sorted(STEP_TYPES))
        raise UnknownStepTypeError(f"Unknown step type: {name} (known: {known})") from None


__all__ = [
    "STEP_TYPES",
    "LabeledStep",
    "Step",
    "get_step_type",
    "register_step_type",
]

"""Stepper: ordered wizard steps with current-step tracking."""

from .config import StepperConfig, load_config
from .core import StepCursor, Stepper
from .errors import (
    ConfigError,
    InvalidFieldError,
    MissingRequiredFieldError,
    StepperError,
    TemplateNotFoundError,
    UnknownStepTypeError,
)
from .models import LabeledStep, Step, register_step_type
from .rendering import register_template, render_template

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "InvalidFieldError",
    "LabeledStep",
    "MissingRequiredFieldError",
    "Step",
    "StepCursor",
    "Stepper",
    "StepperConfig",
    "StepperError",
    "TemplateNotFoundError",
    "UnknownStepTypeError",
    "__version__",
    "load_config",
    "register_step_type",
    "register_template",
    "render_template",
]

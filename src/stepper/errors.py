"""Stepper errors."""


class StepperError(Exception):
    """Base exception for stepper errors."""


class MissingRequiredFieldError(StepperError):
    """Raised when a step record lacks a required field."""

    def __init__(self, field: str, index: int) -> None:
        self.field = field
        self.index = index
        super().__init__(f'The key "{field}" is missing to add the step (record {index}).')


class UnknownStepTypeError(StepperError):
    """Raised when a step type name is not registered."""


class TemplateNotFoundError(StepperError):
    """Raised when a template name is not registered."""


class ConfigError(StepperError):
    """Raised when a config file cannot be parsed or validated."""


class InvalidFieldError(StepperError):
    """Raised when a step record holds a value of the wrong type."""

    def __init__(self, field: str, index: int, value: object) -> None:
        self.field = field
        self.index = index
        self.value = value
        super().__init__(f'Invalid value {value!r} for "{field}" (record {index}).')

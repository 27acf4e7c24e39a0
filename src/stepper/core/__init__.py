"""Core stepper logic.

This package contains the in-memory step engine with no external I/O:
- stepper: Step collection, lazy status computation and index access
- cursor: Forward/backward traversal over the computed step order
"""

from .cursor import StepCursor
from .stepper import Stepper, StepFactory

__all__ = [
    "StepCursor",
    "StepFactory",
    "Stepper",
]

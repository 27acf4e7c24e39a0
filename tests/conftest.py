"""Shared test fixtures for stepper tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from stepper import Stepper


@pytest.fixture
def empty_stepper() -> Stepper:
    """Stepper with no steps."""
    return Stepper()


@pytest.fixture
def abc_stepper() -> Stepper:
    """Stepper with steps a, b, c (positions 1-3) and b current."""
    stepper = Stepper()
    for name in ("a", "b", "c"):
        stepper.add_step(name)
    stepper.set_current_step_name("b")
    return stepper


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file selecting labeled steps and the compact template."""
    path = tmp_path / "stepper.toml"
    path.write_text(
        """[stepper]
default_step_name = "intro"
step_type = "labeled"
template = "compact"
"""
    )
    return path


@pytest.fixture
def stepper_logger() -> Generator[logging.Logger, None, None]:
    """Restore the stepper logger after configure_logging."""
    logger = logging.getLogger("stepper")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    try:
        yield logger
    finally:
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate

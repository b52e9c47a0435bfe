"""Workspace-level pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_logging_state():
    """Automatically preserve and restore logging state for each test.

    The CLI applies a dictConfig that replaces the root handlers with a
    stream handler bound to the runner's captured stderr. Restoring the
    previous handlers keeps later tests from logging to a closed stream.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("tsguard")
    saved_handlers = root.handlers[:]
    saved_root_level = root.level
    saved_package_level = package_logger.level
    saved_package_propagate = package_logger.propagate

    yield

    root.handlers[:] = saved_handlers
    root.setLevel(saved_root_level)
    package_logger.setLevel(saved_package_level)
    package_logger.propagate = saved_package_propagate

import logging

import pytest

from subway_api.app.core.logging_config import resolve_level, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers


def test_resolve_level():
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level("ERROR", debug=True) == logging.DEBUG


def test_debug_forces_debug_level(root_logger):
    setup_logging("INFO", debug=True)
    assert root_logger.level == logging.DEBUG


def test_level_is_applied_on_every_call_and_handlers_once(root_logger):
    setup_logging("INFO")
    count = len(root_logger.handlers)

    setup_logging("WARNING")

    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == count

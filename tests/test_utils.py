import logging

import pytest
from rich.logging import RichHandler

from commander.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode(tmp_path):
    log_file = tmp_path / "commander.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = logging.getLogger().handlers
    assert any(isinstance(handler, RichHandler) for handler in handlers)
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)


def test_setup_logging_json_mode_from_env(monkeypatch):
    monkeypatch.setenv("COMMANDER_LOG_MODE", "json")
    setup_logging(log_filename=None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)

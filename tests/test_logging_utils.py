"""
Tests for termdeck.logging_utils

Covers:
  - level selection and the optional log file
  - an unwritable log path falls back to stderr only
"""

from __future__ import annotations

import logging

import pytest

from termdeck.logging_utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:

    def test_quiet_by_default(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_writes_log_file(self, tmp_path):
        path = tmp_path / "logs" / "talk.log"
        setup_logging(verbose=True, log_path=path)
        logging.getLogger("termdeck.test").debug("reloaded deck")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert logging.getLogger().level == logging.DEBUG
        assert "[DEBUG] reloaded deck" in path.read_text(encoding="utf-8")

    def test_unwritable_path_warns(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        setup_logging(log_path=blocker / "talk.log")
        assert "Cannot write log file" in capsys.readouterr().err
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

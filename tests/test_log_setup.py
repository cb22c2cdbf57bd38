"""Tests for logging setup."""

import logging

import log_setup
from settings import Settings


def _restore_root(handlers, level):
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_unwritable_log_folder_falls_back_to_stderr(tmp_path, monkeypatch) -> None:
    root = logging.getLogger()
    saved = (root.handlers[:], root.level)
    monkeypatch.setattr(log_setup, "LOG_FILE", tmp_path / "missing" / "shadowliner.log")
    try:
        log_setup.setup_logging(Settings())

        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
    finally:
        _restore_root(*saved)


def test_log_file_is_written(tmp_path, monkeypatch) -> None:
    root = logging.getLogger()
    saved = (root.handlers[:], root.level)
    log_file = tmp_path / "shadowliner.log"
    monkeypatch.setattr(log_setup, "LOG_FILE", log_file)
    try:
        log_setup.setup_logging(Settings(log_level="DEBUG"))
        logging.getLogger("shadowliner.test").debug("hello")

        assert root.level == logging.DEBUG
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        _restore_root(*saved)

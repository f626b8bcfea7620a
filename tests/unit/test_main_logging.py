"""Unit tests for the logging bootstrap in launchpad.main."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import pytest

import launchpad.main as main_module
from launchpad.config import Settings


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger restored to its prior handlers and levels afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    quiet_levels = {name: logging.getLogger(name).level for name in main_module.QUIET_LOGGERS}
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    for name, quiet_level in quiet_levels.items():
        logging.getLogger(name).setLevel(quiet_level)


def test_setup_logging_writes_to_configured_file(
    monkeypatch: Any, tmp_path: Path, root_logger: logging.Logger
) -> None:
    log_file = tmp_path / "logs" / "launchpad.log"
    monkeypatch.setattr(
        main_module, "get_settings", lambda: Settings(log_file=log_file, log_level="DEBUG")
    )

    installed = main_module.setup_logging()
    logging.getLogger("launchpad.test").debug("hello from the wizard")
    for handler in installed:
        handler.flush()

    assert root_logger.level == logging.DEBUG
    assert all(handler in root_logger.handlers for handler in installed)
    assert "hello from the wizard" in log_file.read_text(encoding="utf-8")


def test_setup_logging_quiets_library_loggers(
    monkeypatch: Any, tmp_path: Path, root_logger: logging.Logger
) -> None:
    monkeypatch.setattr(
        main_module, "get_settings", lambda: Settings(log_file=tmp_path / "x.log")
    )
    logging.getLogger("textual").setLevel(logging.NOTSET)

    main_module.setup_logging()

    assert logging.getLogger("textual").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING


def test_invalid_settings_fall_back_to_defaults(
    monkeypatch: Any, tmp_path: Path, capsys: Any
) -> None:
    def broken_settings() -> Settings:
        return Settings(log_level="LOUD")  # type: ignore[arg-type]

    monkeypatch.setattr(main_module, "get_settings", broken_settings)
    monkeypatch.setattr(main_module, "FALLBACK_LOG_FILE", tmp_path / "fallback.log")

    assert main_module._log_target() == (tmp_path / "fallback.log", "INFO")
    assert "invalid LAUNCHPAD_* settings" in capsys.readouterr().err


def test_unexpected_settings_error_propagates(monkeypatch: Any) -> None:
    def exploding_settings() -> Settings:
        raise KeyError("boom")

    monkeypatch.setattr(main_module, "get_settings", exploding_settings)

    with pytest.raises(KeyError):
        main_module._log_target()

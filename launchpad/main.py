"""Launchpad entry point: logging bootstrap, then the Typer app."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .cli import app
from .config import get_settings

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

# Libraries whose INFO output would drown the wizard's own log lines
QUIET_LOGGERS = ("textual", "asyncio")

FALLBACK_LOG_FILE = Path.home() / ".launchpad" / "launchpad.log"


def _log_target() -> tuple[Path, str]:
    """Log file and level from settings, or defaults if the env is invalid."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Warning: invalid LAUNCHPAD_* settings, using defaults: {e}", file=sys.stderr)
        return FALLBACK_LOG_FILE, "INFO"
    return settings.log_file, settings.log_level


def setup_logging() -> list[logging.Handler]:
    """Attach a rotating file handler and a stderr handler to the root logger.

    The file gets everything down to DEBUG; stderr only WARNING and up so
    the TUI is not painted over. Returns the handlers it installed.
    """
    log_file, log_level = _log_target()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return [file_handler, console_handler]


def main() -> None:
    """Console script entry point."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()

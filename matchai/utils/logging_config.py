"""Logging setup for the matchai logger tree."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = "matchai.log"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_dir: str = "logs",
    level: str = "INFO",
    logger_levels: Optional[dict[str, str]] = None,
) -> logging.Logger:
    """Configure the ``matchai`` logger.

    Records go to stderr, and to a rotating ``matchai.log`` under `log_dir`
    unless `log_dir` is empty. `logger_levels` overrides the level of child
    loggers, e.g. ``{"matchai.ai": "DEBUG"}``.
    """
    logger = logging.getLogger("matchai")
    logger.setLevel(_resolve_level(level))

    # Re-running setup replaces handlers instead of stacking them
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / LOG_FILE,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # stdout carries the CLI's JSON output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    for name, child_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(_resolve_level(child_level))

    return logger

"""Logging infrastructure for ae-bridge.

Bridge activity is written to ~/Library/Logs/ae-bridge.log with automatic
rotation. Log lines recovered from After Effects scripts are emitted on the
``ae_bridge.aftereffects`` logger by the default log sink.

Usage:
    from ae_bridge.logging import setup_logging, forward_to_logger

    # Initialize once at startup
    setup_logging()

    # Default sink for lines logged by scripts inside After Effects
    forward_to_logger("rendered comp 1", "rendered comp 2")
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Default log directory (macOS standard location)
DEFAULT_LOG_DIR = Path.home() / "Library" / "Logs"

# Default rotation settings
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3

LOG_FILE_NAME = "ae-bridge.log"
SCRIPT_LOGGER_NAME = "ae_bridge.aftereffects"

# Module-level state
_handler: RotatingFileHandler | None = None


def setup_logging(
    log_dir: Path | None = None,
    log_level: str = "INFO",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> None:
    """Initialize the logging system.

    Args:
        log_dir: Directory for log files (default: ~/Library/Logs)
        log_level: Minimum log level (default: INFO)
        max_bytes: Max size per log file before rotation (default: 5MB)
        backup_count: Number of backup files to keep (default: 3)
    """
    global _handler

    log_dir = log_dir or DEFAULT_LOG_DIR
    max_bytes = max_bytes or DEFAULT_MAX_BYTES
    backup_count = backup_count if backup_count is not None else DEFAULT_BACKUP_COUNT

    # Ensure log directory exists
    log_dir.mkdir(parents=True, exist_ok=True)

    # Configure the root ae_bridge logger
    root_logger = logging.getLogger("ae_bridge")
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Replace the handler on re-init to avoid duplicate lines
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()

    _handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    _handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    root_logger.addHandler(_handler)


def get_script_logger() -> logging.Logger:
    """Get the logger that receives lines logged inside After Effects."""
    return logging.getLogger(SCRIPT_LOGGER_NAME)


def forward_to_logger(*lines: Any) -> None:
    """Log sink that emits each After Effects log line at INFO."""
    logger = get_script_logger()
    for line in lines:
        logger.info("%s", line)


def reset_logging() -> None:
    """Reset logging state (primarily for testing)."""
    global _handler

    if _handler is not None:
        logging.getLogger("ae_bridge").removeHandler(_handler)
        _handler.close()

    _handler = None

"""Debug-file logging for assertion failures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path,
    verbose: bool = False,
    logger_name: str = "buildassert",
    level: int | str = logging.DEBUG,
) -> logging.Logger:
    """
    Route assertion failures and narrowing steps to a debug file.

    configure() calls this for the ``buildassert`` logger, so every module
    logger below it (``buildassert.assertions.*``) lands in debug_file.
    With verbose=True the same records are mirrored to stderr.

    Args:
        debug_file: Log file, created along with its parent directories
        verbose: Also log to stderr
        logger_name: Logger to attach the handlers to
        level: Level applied to the logger and its handlers

    Raises:
        RuntimeError: If the logger already has handlers attached. Call
            config.reset_settings() first to reconfigure.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger name"
        )

    logger.disabled = False
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger

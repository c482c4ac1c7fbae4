"""Logging configuration for checkboard."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path


def setup_logging(
    verbose: int = 0, log_file: Path | None = None, console: bool = True
) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
        console: Also log to stderr when verbose (off while the TUI runs)
    """
    if log_file is None and (verbose == 0 or not console):
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("checkboard")
    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console and verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    level_name = logging.getLevelName(level)
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("")
    logger.info("=" * 60)
    logger.info("checkboard starting | %s | level=%s", timestamp, level_name)
    logger.info("=" * 60)

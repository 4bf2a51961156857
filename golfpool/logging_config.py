"""Centralized logging configuration for scoreboard refresh runs."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Chatty third-party loggers that only matter when debugging a fetch
NOISY_LOGGERS = ('urllib3', 'requests')


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI's --verbose/--quiet flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    log_dir: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for a refresh run.

    The console gets short "LEVEL: message" lines. When log_dir is given,
    each run also writes a detailed golfpool_refresh_<timestamp>.log there,
    which is what the scheduled job keeps when a refresh goes wrong.

    Args:
        log_dir: Directory for the run's log file (default: no file)
        verbose: Log at DEBUG, including HTTP connection details
        quiet: Only log warnings and errors
        log_to_console: Whether to log to stdout (default: True)

    Returns:
        The configured 'golfpool' logger

    Example:
        from golfpool.logging_config import setup_logging
        logger = setup_logging(Path('logs'), quiet=True)
    """
    level = level_for(verbose, quiet)

    logger = logging.getLogger('golfpool')
    logger.setLevel(level)
    logger.handlers = []

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'golfpool_refresh_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    return logger

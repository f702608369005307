"""
Centralized logging configuration.

This module provides a bootstrap_logging function that entry points (the CLI,
the pytest plugin) call to configure logging consistently using Python's
native INI format.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

from .settings import get_setting

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
FALLBACK_FORMAT = '%(levelname)s: %(name)s: %(message)s'

_bootstrapped = False


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then config/.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    for candidate in (Path('logging.ini'), Path('config/logging.ini')):
        if candidate.exists():
            return candidate
    return None


def _get_level_override() -> Optional[str]:
    """Return the configured log level, or None if unset."""
    level = get_setting('log-level')
    if level is None:
        return None
    level = str(level).strip().upper()
    if level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{level}', using INFO", file=sys.stderr)
        return 'INFO'
    return level


def bootstrap_logging(name: Optional[str] = None, force: bool = False) -> None:
    """
    Bootstrap logging configuration for the application.

    Loads logging.ini with logging.config.fileConfig() when one is found,
    otherwise falls back to basicConfig on stderr. The log-level setting
    (LOG_LEVEL) is applied on top of either. Repeated calls are no-ops
    unless ``force`` is set.

    Args:
        name: Optional logger name to report the configuration under
        force: Reconfigure even if logging was already bootstrapped
    """
    global _bootstrapped
    if _bootstrapped and not force:
        return

    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, stream=sys.stderr)
    else:
        try:
            logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
        except (KeyError, ValueError, OSError, RuntimeError) as e:
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            print("Using basic logging configuration", file=sys.stderr)
            logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, stream=sys.stderr)

    level = _get_level_override()
    if level:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, level))
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(getattr(logging, level))
        logging.getLogger('pirates_client').setLevel(getattr(logging, level))

    _bootstrapped = True
    logging.getLogger(name).debug(f"Logging configured from {config_path or 'defaults'}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, ensuring logging is bootstrapped.

    Args:
        name: Name for the logger

    Returns:
        Configured logger instance
    """
    bootstrap_logging()
    return logging.getLogger(name)

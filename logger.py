"""Logging setup for the exporter: colored console output and optional rotating log file."""

import logging
import logging.handlers
from typing import Any, Dict, List, Optional

from settings import Settings

LOGGER_NAME = 'news_format_exporter'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def resolve_level(verbosity: int = 0, level: Optional[str] = None) -> int:
    """
    Pick the effective log level.

    An explicit level name wins; otherwise -v selects INFO and -vv DEBUG.

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    if level:
        name = level.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{level}'. Must be one of: {list(LOG_LEVELS)}")
        return getattr(logging, name)

    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def _console_formatter(log_format: str, date_format: str) -> logging.Formatter:
    try:
        import colorlog
    except ImportError:
        return logging.Formatter(fmt=log_format, datefmt=date_format)

    return colorlog.ColoredFormatter(
        fmt='%(log_color)s' + log_format,
        datefmt=date_format,
        log_colors=LOG_COLORS
    )


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    level: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``news_format_exporter`` logger hierarchy.

    Calling it again replaces the handlers installed by the previous call,
    so the command line can reconfigure once the config file is read.

    Args:
        verbosity: Count of -v flags (0=WARNING, 1=INFO, 2+=DEBUG)
        log_file: Optional path of a rotating log file
        log_format: Optional record format
        date_format: Optional timestamp format
        level: Optional explicit level name, overrides verbosity

    Returns:
        The package logger
    """
    log_level = resolve_level(verbosity, level)
    log_format = log_format or DEFAULT_FORMAT
    date_format = date_format or DEFAULT_DATE_FORMAT

    # Dependencies (bs4, markdownify) stay at WARNING on the root logger
    logging.basicConfig(level=logging.WARNING, format=log_format, datefmt=date_format)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_console_formatter(log_format, date_format))
    logger.addHandler(console_handler)

    if not log_file:
        logger.debug(f"Console logging only. Level: {logging.getLevelName(log_level)}")
        return logger

    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
    except OSError as e:
        logger.warning(f"Cannot write log file {log_file}: {str(e)}")
        return logger

    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))
    logger.addHandler(file_handler)
    logger.debug(f"Logging to {log_file} at {logging.getLevelName(log_level)}")

    return logger


def log_section(title: str) -> None:
    """Log a banner separating the phases of a run."""
    logger = logging.getLogger(LOGGER_NAME)

    logger.info("=" * 60)
    logger.info(f"  {title.upper()}")
    logger.info("=" * 60)


def log_settings(settings: Settings) -> None:
    """Log every setting a generation pass starts from, sorted by name."""
    logger = logging.getLogger(LOGGER_NAME)

    log_section("Settings")

    values = settings.to_dict()
    width = max((len(key) for key in values), default=0)
    for key in sorted(values):
        logger.info(f"{key.ljust(width)} : {values[key]!r}")


def log_document_summary(document: Dict[str, Any], bundles: List[str]) -> None:
    """Log component counts per role and every bundle the document needs."""
    logger = logging.getLogger(LOGGER_NAME)

    log_section("Summary")

    roles: Dict[str, int] = {}
    for component in document.get('components', []):
        role = component.get('role', 'unknown')
        roles[role] = roles.get(role, 0) + 1

    for role, count in roles.items():
        logger.info(f"{role}: {count}")

    logger.info(f"Text styles: {len(document.get('componentTextStyles', {}))}")
    logger.info(f"Layouts: {len(document.get('componentLayouts', {}))}")

    for bundle in bundles:
        logger.info(f"Bundle: {bundle}")


__all__ = [
    'setup_logging',
    'resolve_level',
    'log_section',
    'log_settings',
    'log_document_summary'
]

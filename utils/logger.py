"""
Logging configuration utility.

All loggers in this project live under the ``version_sentinel`` namespace so
that a host application can configure them without touching its root logger.
"""

import logging
import sys
from typing import Any, Dict, Optional

LOGGER_NAMESPACE = 'version_sentinel'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = 'INFO',
    format_str: str = None,
    log_file: str = None
) -> logging.Logger:
    """
    Configure the project logger namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_str: Log message format
        log_file: Optional file to write logs to

    Returns:
        The configured namespace logger
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(format_str or DEFAULT_FORMAT)

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(numeric_level)
    namespace_logger.propagate = False

    # Repeated calls replace handlers instead of stacking them
    for handler in namespace_logger.handlers[:]:
        namespace_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    namespace_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        namespace_logger.addHandler(file_handler)

    return namespace_logger


def setup_logging_from_settings(settings: Optional[Dict[str, Any]]) -> logging.Logger:
    """Configure logging from the ``logging`` section of the YAML settings."""
    log_settings = (settings or {}).get('logging') or {}
    return setup_logging(
        level=log_settings.get('level', 'INFO'),
        format_str=log_settings.get('format'),
        log_file=log_settings.get('file'),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the project namespace.

    Args:
        name: Component name, usually the class name

    Returns:
        Logger instance
    """
    return logging.getLogger(f'{LOGGER_NAMESPACE}.{name}')

"""
Utils package - Shared utility functions.
"""

from utils.logger import setup_logging, setup_logging_from_settings, get_logger
from utils.interval import parse_interval, DEFAULT_INTERVAL
from utils import version

__all__ = [
    'setup_logging',
    'setup_logging_from_settings',
    'get_logger',
    'parse_interval',
    'DEFAULT_INTERVAL',
    'version',
]

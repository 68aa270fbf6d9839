"""
Interval parser for human readable poll intervals ("2h", "30 minutes", "1 day").
"""

import logging
import re
from datetime import timedelta
from typing import Union

logger = logging.getLogger('version_sentinel.interval')

DEFAULT_INTERVAL = timedelta(hours=2)

_INTERVAL_PATTERN = re.compile(r'^\s*(\d+)\s*([a-z]+)\s*$', re.IGNORECASE)

# Months and years use the average Gregorian lengths
UNIT_SECONDS = {
    's': 1, 'sec': 1, 'second': 1, 'seconds': 1,
    'm': 60, 'min': 60, 'minute': 60, 'minutes': 60,
    'h': 3600, 'hr': 3600, 'hour': 3600, 'hours': 3600,
    'd': 86400, 'day': 86400, 'days': 86400,
    'wk': 604800, 'week': 604800, 'weeks': 604800,
    'mo': 2629746, 'month': 2629746, 'months': 2629746,
    'y': 31556952, 'year': 31556952, 'years': 31556952,
}


def parse_interval(
    interval: Union[str, timedelta, int, float, None],
    default: timedelta = DEFAULT_INTERVAL
) -> timedelta:
    """
    Parse an interval into a timedelta.

    Args:
        interval: Human readable interval such as "2h" or "30 minutes",
            a timedelta, or a number of seconds
        default: Value returned when the interval cannot be understood

    Returns:
        Parsed interval, or ``default`` for unparsable input
    """
    if isinstance(interval, timedelta):
        return interval if interval.total_seconds() > 0 else default

    if isinstance(interval, bool) or interval is None:
        logger.warning(f"Invalid interval {interval!r}, using {default}")
        return default

    if isinstance(interval, (int, float)):
        return timedelta(seconds=interval) if interval > 0 else default

    match = _INTERVAL_PATTERN.match(str(interval))
    if not match:
        logger.warning(f"Invalid interval {interval!r}, using {default}")
        return default

    quantity = int(match.group(1))
    seconds = UNIT_SECONDS.get(match.group(2).lower())
    if seconds is None or quantity <= 0:
        logger.warning(f"Invalid interval {interval!r}, using {default}")
        return default

    return timedelta(seconds=quantity * seconds)

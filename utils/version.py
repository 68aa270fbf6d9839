"""
Version comparison helpers.

Versions are compared as dotted numeric segments, left to right, with
missing trailing segments treated as zero ("1.2" == "1.2.0"). A single
leading "v" is tolerated. Anything else that is not purely numeric is
rejected with InvalidVersionError rather than being compared loosely.
"""

import re
from itertools import zip_longest
from typing import Any, Tuple

from models.exceptions import InvalidVersionError

_NUMERIC_VERSION = re.compile(r'^\d+(\.\d+)*$')


def normalize(value: Any) -> Tuple[int, ...]:
    """
    Convert a version-like value into a tuple of integer segments.

    Args:
        value: Version string, number or any object with a version-like str()

    Returns:
        Tuple of integer segments

    Raises:
        InvalidVersionError: If the value is not a dotted numeric version
    """
    if value is None:
        raise InvalidVersionError(value)

    text = str(value).strip()
    if text[:1] in ('v', 'V'):
        text = text[1:]

    if not _NUMERIC_VERSION.match(text):
        raise InvalidVersionError(value)

    return tuple(int(segment) for segment in text.split('.'))


def compare(expected: Any, actual: Any) -> int:
    """
    Compare two versions.

    Returns:
        -1 if expected < actual, 0 if equal, 1 if expected > actual
    """
    left = normalize(expected)
    right = normalize(actual)

    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return -1 if a < b else 1
    return 0


def is_equal(expected: Any, actual: Any) -> bool:
    return compare(expected, actual) == 0


def is_greater(expected: Any, actual: Any) -> bool:
    return compare(expected, actual) > 0


def is_greater_or_equal(expected: Any, actual: Any) -> bool:
    return compare(expected, actual) >= 0


def is_less(expected: Any, actual: Any) -> bool:
    return compare(expected, actual) < 0


def is_less_or_equal(expected: Any, actual: Any) -> bool:
    return compare(expected, actual) <= 0

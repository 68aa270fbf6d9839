"""
Release classification enums.
"""

from enum import Enum
from functools import total_ordering
from typing import Dict, Optional


@total_ordering
class StabilityTier(Enum):
    """Maturity level of a release, ordered ALPHA < BETA < PRE_RELEASE < RELEASE."""

    ALPHA = 1
    BETA = 2
    PRE_RELEASE = 3
    RELEASE = 4

    def __lt__(self, other):
        if not isinstance(other, StabilityTier):
            return NotImplemented
        return self.value < other.value

    @property
    def is_stable(self) -> bool:
        return self is StabilityTier.RELEASE


TAG_ALIASES: Dict[str, StabilityTier] = {
    'a': StabilityTier.ALPHA,
    'alpha': StabilityTier.ALPHA,
    'b': StabilityTier.BETA,
    'beta': StabilityTier.BETA,
    'p': StabilityTier.PRE_RELEASE,
    'pr': StabilityTier.PRE_RELEASE,
    'pre': StabilityTier.PRE_RELEASE,
    'pre-release': StabilityTier.PRE_RELEASE,
    'r': StabilityTier.RELEASE,
    'rc': StabilityTier.RELEASE,
    'release': StabilityTier.RELEASE,
}


def classify(fragment: Optional[str]) -> StabilityTier:
    """
    Map a free-form tag fragment to a stability tier.

    Unrecognised fragments resolve to RELEASE so that providers using tags
    we do not know about never block a notification.
    """
    if not fragment:
        return StabilityTier.RELEASE
    return TAG_ALIASES.get(fragment.strip().lower(), StabilityTier.RELEASE)


def tier_equals(expected: StabilityTier, actual: Optional[str]) -> bool:
    return classify(actual) is expected


class UpdateResult(Enum):
    """Outcome of a check cycle."""

    AVAILABLE = 'available'
    LATEST = 'latest'
    DISABLED = 'disabled'
    FAIL_CONNECTION = 'fail_connection'
    FAIL_VERSION = 'fail_version'
    UNKNOWN = 'unknown'

    @property
    def is_failure(self) -> bool:
        return self in (UpdateResult.FAIL_CONNECTION, UpdateResult.FAIL_VERSION)

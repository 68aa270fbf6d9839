"""
Updater Settings model.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Optional

from utils.interval import DEFAULT_INTERVAL, parse_interval
from utils.logger import get_logger

logger = get_logger('UpdaterSettings')


def _read_flag(data: Dict[str, Any], key: str, default: bool) -> bool:
    """Read a YAML boolean, falling back to the default for any other type."""
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning(f"Invalid value {value!r} for '{key}', expected true or false; using {default}")
    return default


@dataclass(frozen=True)
class UpdaterSettings:
    """Settings read by every check cycle."""

    enabled: bool = True
    unstable_preferred: bool = False
    interval: timedelta = field(default=DEFAULT_INTERVAL)
    permission: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'UpdaterSettings':
        """Create settings from the ``updater`` section of the configuration."""
        data = data or {}
        return cls(
            enabled=_read_flag(data, 'enabled', True),
            unstable_preferred=_read_flag(data, 'unstable_preferred', False),
            interval=parse_interval(data.get('interval', DEFAULT_INTERVAL)),
            permission=data.get('permission') or None,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'enabled': self.enabled,
            'unstable_preferred': self.unstable_preferred,
            'interval': int(self.interval.total_seconds()),
            'permission': self.permission,
        }

"""
Update signal models published at the end of a check cycle.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Tuple

from .audience import AudienceMember
from .release import StabilityTier, UpdateResult


@dataclass(frozen=True)
class UpdateCompleteEvent:
    """Published when a newer release is available for the audience."""

    result: UpdateResult
    version: str
    tier: StabilityTier
    audience: Tuple[AudienceMember, ...] = ()
    provider: Any = None
    asynchronous: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def download_link(self) -> Optional[str]:
        return self.provider.get_download_link() if self.provider else None

    @property
    def changelog_link(self) -> Optional[str]:
        return self.provider.get_changelog_link() if self.provider else None

    def __str__(self) -> str:
        source = self.provider.get_provider_name() if self.provider else 'unknown'
        return (
            f"[{self.result.name}] {self.version} ({self.tier.name}) via {source}\n"
            f"  Download:  {self.download_link}\n"
            f"  Changelog: {self.changelog_link}"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'result': self.result.value,
            'version': self.version,
            'tier': self.tier.name,
            'audience': [member.identity for member in self.audience],
            'provider': self.provider.get_provider_name() if self.provider else None,
            'download_link': self.download_link,
            'changelog_link': self.changelog_link,
            'asynchronous': self.asynchronous,
            'created_at': self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UpdateFailedEvent:
    """Published when a check cycle fails for a connection or version reason."""

    result: UpdateResult
    provider: Any = None
    error: Optional[str] = None
    asynchronous: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        source = self.provider.get_provider_name() if self.provider else 'unknown'
        return f"[{self.result.name}] via {source}: {self.error or 'no details'}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'result': self.result.value,
            'provider': self.provider.get_provider_name() if self.provider else None,
            'error': self.error,
            'asynchronous': self.asynchronous,
            'created_at': self.created_at.isoformat(),
        }

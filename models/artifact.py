"""
Remote Artifact model.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidVersionError
from .release import StabilityTier, classify

VERSION_PATTERN = re.compile(r'\d+\.\d+(?:\.\d+)?(?:\.\d+)?')

# Full tag words may run into following letters ("prerelease", "preview").
# Abbreviations must stand alone, so "latest" and "ProtocolLib" carry no tag.
TAG_PATTERN = re.compile(
    r'(?<![a-z])(pre-release|release|alpha|beta|pre|(?:pr|rc|a|b|p|r)(?![a-z]))',
    re.IGNORECASE
)


@dataclass(frozen=True)
class RemoteArtifact:
    """A parsed version: its numeric part and the stability tier of its tag."""

    version: str
    tier: StabilityTier = StabilityTier.RELEASE
    raw_version: Optional[str] = None

    @classmethod
    def parse(cls, raw_version: str) -> 'RemoteArtifact':
        """
        Parse a raw version string such as "v1.3.0-beta" or "Build 2.4".

        Args:
            raw_version: Version string reported locally or by a provider

        Returns:
            RemoteArtifact with the normalized version and tier

        Raises:
            InvalidVersionError: If no numeric version can be extracted
        """
        if raw_version is None:
            raise InvalidVersionError(raw_version)

        text = str(raw_version)
        version_match = VERSION_PATTERN.search(text)
        if not version_match:
            raise InvalidVersionError(raw_version)

        tag_match = TAG_PATTERN.search(text)
        tier = classify(tag_match.group(1)) if tag_match else StabilityTier.RELEASE

        return cls(version=version_match.group(0), tier=tier, raw_version=text)

    @classmethod
    def from_provider(cls, provider) -> Optional['RemoteArtifact']:
        """Build an artifact from a provider, or None if it reported no version."""
        remote_version = provider.get_remote_version()
        if remote_version is None:
            return None
        return cls.parse(remote_version)

    @property
    def is_stable(self) -> bool:
        return self.tier.is_stable

    def __str__(self) -> str:
        if self.is_stable:
            return self.version
        return f"{self.version} ({self.tier.name})"

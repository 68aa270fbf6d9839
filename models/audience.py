"""
Audience member model.

The host application owns its recipients (players, users, channels). The
updater only keeps references to them and asks whether they are currently
reachable and permitted to see update notices.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Hashable, Optional, Set


class AudienceMember(ABC):
    """Abstract reference to a notification recipient."""

    @property
    @abstractmethod
    def identity(self) -> Hashable:
        """
        Stable identity of the recipient.

        Returns:
            Hashable key used to deduplicate the audience
        """
        pass

    @abstractmethod
    def is_online(self) -> bool:
        """Whether the recipient can be reached right now."""
        pass

    @abstractmethod
    def has_permission(self, permission: str) -> bool:
        """Whether the recipient holds the given permission node."""
        pass


@dataclass(eq=False)
class StaticMember(AudienceMember):
    """Simple in-memory audience member, useful for scripts and hosts without sessions."""

    name: str
    online: bool = True
    permissions: Set[str] = field(default_factory=set)
    contact: Optional[str] = None

    @property
    def identity(self) -> Hashable:
        return self.name

    def is_online(self) -> bool:
        return self.online

    def has_permission(self, permission: str) -> bool:
        return '*' in self.permissions or permission in self.permissions

"""
Models package - Data classes for the application.
"""

from models.exceptions import (
    UpdaterError,
    ConfigurationError,
    InvalidVersionError,
    UpdateFailedError,
    SchedulerError,
)
from models.release import StabilityTier, UpdateResult, classify, tier_equals
from models.artifact import RemoteArtifact
from models.audience import AudienceMember, StaticMember
from models.settings import UpdaterSettings
from models.events import UpdateCompleteEvent, UpdateFailedEvent

__all__ = [
    'UpdaterError',
    'ConfigurationError',
    'InvalidVersionError',
    'UpdateFailedError',
    'SchedulerError',
    'StabilityTier',
    'UpdateResult',
    'classify',
    'tier_equals',
    'RemoteArtifact',
    'AudienceMember',
    'StaticMember',
    'UpdaterSettings',
    'UpdateCompleteEvent',
    'UpdateFailedEvent',
]

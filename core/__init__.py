"""
Core package - Contains main business logic.
"""

from core.updater import Updater, UpdaterBuilder, check_for_updates
from core.scheduler import UpdateScheduler
from core.events import EventBus
from core.registry import ProviderRegistry

__all__ = [
    'Updater',
    'UpdaterBuilder',
    'check_for_updates',
    'UpdateScheduler',
    'EventBus',
    'ProviderRegistry',
]

"""
Exception hierarchy for the update checker.
"""


class UpdaterError(Exception):
    """Base class for all updater errors."""


class ConfigurationError(UpdaterError):
    """Raised when the updater is configured in a way it cannot run with."""


class InvalidVersionError(UpdaterError, ValueError):
    """Raised when a version string has no extractable numeric version."""

    def __init__(self, version=None, message: str = None):
        self.version = version
        if message is None:
            message = f"Unable to extract a version from: {version!r}"
        super().__init__(message)


class UpdateFailedError(UpdaterError):
    """Raised when a check cycle hits an I/O failure it cannot classify."""


class SchedulerError(UpdaterError):
    """Raised when the scheduler is started twice or misused."""

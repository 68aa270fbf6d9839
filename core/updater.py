"""
Updater - Orchestrates update checks across an ordered chain of providers.

Configuration happens on an UpdaterBuilder. Once built, an Updater has a
fixed provider chain, audience and settings, and exposes a single
``run_cycle()`` entry point that the scheduler calls either on the caller's
thread or on a worker thread.
"""

import logging
import socket
from datetime import timedelta
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

import requests

from models.artifact import RemoteArtifact
from models.audience import AudienceMember
from models.events import UpdateCompleteEvent, UpdateFailedEvent
from models.exceptions import ConfigurationError, InvalidVersionError, UpdateFailedError
from models.release import UpdateResult
from models.settings import UpdaterSettings
from utils import version
from utils.interval import DEFAULT_INTERVAL, parse_interval
from utils.logger import get_logger

# Connection-level failures are reported as FAIL_CONNECTION
CONNECTION_ERRORS = (
    requests.exceptions.ConnectionError,
    ConnectionError,
    socket.gaierror,
)

# Any other I/O failure aborts the cycle with UpdateFailedError
IO_ERRORS = (
    requests.exceptions.RequestException,
    OSError,
)

Publisher = Callable[[Any], Any]


def unique_members(members: Iterable[AudienceMember]) -> List[AudienceMember]:
    """Keep the first member for each identity, preserving order."""
    unique: List[AudienceMember] = []
    for member in members:
        if all(existing.identity != member.identity for existing in unique):
            unique.append(member)
    return unique


class Updater:
    """Runs check cycles over a fixed provider chain and notifies the audience."""

    def __init__(
        self,
        current_version: str,
        providers: Iterable[Any],
        audience: Iterable[AudienceMember] = (),
        settings: UpdaterSettings = None,
        publish: Optional[Publisher] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the updater.

        Args:
            current_version: Locally installed version
            providers: Providers in priority order
            audience: Recipients of update notices, deduplicated by identity
            settings: Check settings, defaults to UpdaterSettings()
            publish: Callable receiving UpdateCompleteEvent / UpdateFailedEvent,
                typically EventBus.publish
            logger: Logger to use instead of the namespace default
        """
        self._current_version = current_version
        self._providers: Tuple[Any, ...] = tuple(providers)
        self._audience: Tuple[AudienceMember, ...] = tuple(unique_members(audience))
        self._settings = settings or UpdaterSettings()
        self._publish = publish
        self.logger = logger or get_logger('Updater')

        self._result = UpdateResult.UNKNOWN
        self._latest: Optional[RemoteArtifact] = None
        self._provider = None

    # ------------------------------------------------------------------
    # Check cycle
    # ------------------------------------------------------------------

    def run_cycle(self, asynchronous: bool = False) -> UpdateResult:
        """
        Run one check cycle.

        Args:
            asynchronous: Whether the cycle runs off the caller's main thread,
                recorded on the emitted events

        Returns:
            The result of this cycle

        Raises:
            ConfigurationError: If no provider is configured
            UpdateFailedError: On an I/O failure that is neither a connection
                nor a version problem
        """
        if not self._providers:
            raise ConfigurationError('You must provide at least one update provider for this updater')

        self._result = UpdateResult.UNKNOWN
        self._provider = None

        if not self._settings.enabled:
            self._result = UpdateResult.DISABLED
            self.logger.info('Update checks are disabled')
            return self._result

        if not self._audience:
            self.logger.warning('You have not provided an audience for the updater')

        self.logger.info(
            f"Checking {len(self._providers)} providers for updates "
            f"(current version {self._current_version})"
        )

        try:
            local = RemoteArtifact.parse(self._current_version)
            latest = self._find_latest(local)
        except CONNECTION_ERRORS as e:
            return self._fail(UpdateResult.FAIL_CONNECTION, e, asynchronous)
        except InvalidVersionError as e:
            return self._fail(UpdateResult.FAIL_VERSION, e, asynchronous)
        except IO_ERRORS as e:
            self.logger.error(f"Update check failed: {type(e).__name__}: {e}")
            raise UpdateFailedError('The updater failed to execute its task') from e

        if not version.is_greater(latest.version, local.version):
            self._result = UpdateResult.LATEST
            self.logger.info(f"Running the latest version ({local.version})")
            return self._result

        if not self._settings.unstable_preferred and not latest.is_stable:
            self.logger.info(
                f"Skipping {latest.tier.name} build {latest.version}, unstable builds are not preferred"
            )
            return self._result

        self._result = UpdateResult.AVAILABLE
        self.logger.info(
            f"Update available: {latest.version} ({latest.tier.name}) "
            f"from {self._provider.get_provider_name()}"
        )
        self._emit(UpdateCompleteEvent(
            result=self._result,
            version=latest.version,
            tier=latest.tier,
            audience=tuple(self.resolve_audience()),
            provider=self._provider,
            asynchronous=asynchronous,
        ))
        return self._result

    def _find_latest(self, local: RemoteArtifact) -> RemoteArtifact:
        """
        Walk the provider chain until one reports a version newer than local.

        Returns:
            The first strictly newer artifact, otherwise the last one built,
            otherwise the local artifact
        """
        latest, winner = local, None
        self._latest = local

        for provider in self._providers:
            # Set before fetching so failure events name the failing provider
            self._provider = provider
            name = provider.get_provider_name()

            if not provider.initialize():
                self.logger.warning(f"{name} returned no release data, trying next provider")
                continue

            artifact = RemoteArtifact.from_provider(provider)
            if artifact is None:
                self.logger.warning(f"{name} did not report a version, trying next provider")
                continue

            latest, winner = artifact, provider
            self._latest = artifact
            self.logger.debug(f"{name} reports {artifact.raw_version!r} -> {artifact}")

            if version.is_greater(artifact.version, local.version):
                break

        self._provider = winner
        return latest

    def _fail(self, result: UpdateResult, error: Exception, asynchronous: bool) -> UpdateResult:
        self._result = result
        source = self._provider.get_provider_name() if self._provider else 'local version'
        self.logger.warning(f"Update check failed ({result.name}) at {source}: {error}")
        self._emit(UpdateFailedEvent(
            result=result,
            provider=self._provider,
            error=str(error),
            asynchronous=asynchronous,
        ))
        return result

    def _emit(self, event: Any) -> None:
        if self._publish is None:
            self.logger.debug(f"No publisher configured, dropping {type(event).__name__}")
            return
        self._publish(event)

    # ------------------------------------------------------------------
    # Audience
    # ------------------------------------------------------------------

    def resolve_audience(self) -> List[AudienceMember]:
        """
        Get the members that should receive an update notice right now.

        Returns:
            Online members holding the configured permission (if any)
        """
        return [member for member in self._audience if self._is_notifiable(member)]

    def _is_notifiable(self, member: AudienceMember) -> bool:
        permission = self._settings.permission
        return member.is_online() and (permission is None or member.has_permission(permission))

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def result(self) -> UpdateResult:
        return self._result

    @property
    def latest_artifact(self) -> Optional[RemoteArtifact]:
        return self._latest

    @property
    def provider(self):
        """Provider that supplied the standing artifact of the last cycle."""
        return self._provider

    @property
    def providers(self) -> Tuple[Any, ...]:
        return self._providers

    @property
    def audience(self) -> Tuple[AudienceMember, ...]:
        return self._audience

    @property
    def settings(self) -> UpdaterSettings:
        return self._settings

    @property
    def current_version(self) -> str:
        return self._current_version

    @property
    def interval(self) -> timedelta:
        return self._settings.interval

    @property
    def is_enabled(self) -> bool:
        return self._settings.enabled


class UpdaterBuilder:
    """Chainable configuration for an Updater."""

    def __init__(
        self,
        current_version: str,
        publish: Optional[Publisher] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.current_version = current_version
        self.publish = publish
        self.logger = logger

        self._providers: List[Any] = []
        self._audience: List[AudienceMember] = []
        self._enabled = True
        self._unstable_preferred = False
        self._interval = DEFAULT_INTERVAL
        self._permission: Optional[str] = None

    def add_provider(self, provider) -> 'UpdaterBuilder':
        if provider is None:
            raise ConfigurationError('An error occurred whilst trying to add a null provider')
        self._providers.append(provider)
        return self

    def add_audience_member(self, member: AudienceMember) -> 'UpdaterBuilder':
        if member is None:
            raise ConfigurationError('An error occurred whilst trying to add a null audience member')
        self._audience = unique_members(self._audience + [member])
        return self

    def add_audience(self, members: Iterable[AudienceMember]) -> 'UpdaterBuilder':
        for member in members:
            self.add_audience_member(member)
        return self

    def set_enabled(self, toggle: bool) -> 'UpdaterBuilder':
        self._enabled = bool(toggle)
        return self

    def set_unstable_preferred(self, toggle: bool) -> 'UpdaterBuilder':
        self._unstable_preferred = bool(toggle)
        return self

    def set_interval(self, interval: Union[str, timedelta, int, float]) -> 'UpdaterBuilder':
        """Accepts "2h", "30 minutes", "1 day", a timedelta or seconds; falls back to 2 hours."""
        self._interval = parse_interval(interval)
        return self

    def set_permission(self, permission: Optional[str]) -> 'UpdaterBuilder':
        self._permission = permission or None
        return self

    def apply_settings(self, settings: UpdaterSettings) -> 'UpdaterBuilder':
        """Copy every field of an UpdaterSettings onto this builder."""
        self._enabled = settings.enabled
        self._unstable_preferred = settings.unstable_preferred
        self._interval = settings.interval
        self._permission = settings.permission
        return self

    @property
    def settings(self) -> UpdaterSettings:
        return UpdaterSettings(
            enabled=self._enabled,
            unstable_preferred=self._unstable_preferred,
            interval=self._interval,
            permission=self._permission,
        )

    def build(self) -> Updater:
        """
        Finalize the configuration.

        Raises:
            ConfigurationError: If no provider was added
        """
        if not self._providers:
            raise ConfigurationError('You must provide at least one update provider for this updater')

        return Updater(
            current_version=self.current_version,
            providers=self._providers,
            audience=self._audience,
            settings=self.settings,
            publish=self.publish,
            logger=self.logger,
        )


def check_for_updates(current_version: str, *providers, **settings) -> UpdateResult:
    """
    Convenience function to run a single check cycle.

    Args:
        current_version: Locally installed version
        providers: Providers in priority order
        settings: Keyword arguments for UpdaterSettings

    Returns:
        UpdateResult of the cycle
    """
    updater = Updater(current_version, providers, settings=UpdaterSettings(**settings))
    return updater.run_cycle()

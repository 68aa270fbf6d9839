"""
Provider Registry - Maps provider types to adapters and loads the YAML configuration.
"""

import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

import yaml

from models.audience import AudienceMember
from models.settings import UpdaterSettings
from providers.base_provider import BaseProvider
from providers.bukkit_provider import BukkitProvider
from providers.github_provider import GithubProvider
from providers.polymart_provider import PolymartProvider
from utils.logger import get_logger

from core.updater import UpdaterBuilder


class ProviderRegistry:
    """Registry that manages updater configuration and provider instantiation."""

    # Map provider types to adapter classes and the config key of their argument
    PROVIDER_MAP: Dict[str, Type[BaseProvider]] = {
        'github': GithubProvider,
        'bukkit': BukkitProvider,
        'polymart': PolymartProvider,
    }
    PROVIDER_ARGUMENTS: Dict[str, str] = {
        'github': 'repo',
        'bukkit': 'resource_id',
        'polymart': 'resource_id',
    }

    def __init__(self, config_path: str = None):
        """
        Initialize the registry with a configuration file.

        Args:
            config_path: Path to updater.yaml
        """
        self.base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.logger = get_logger('ProviderRegistry')

        if config_path is None:
            config_path = os.path.join(self.base_dir, 'config', 'updater.yaml')

        self.config_path = config_path
        self.config = self._load_config(config_path)

    def _load_config(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.warning(f"Config file not found: {path}")
            return {}
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing YAML file {path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.error(f"Config file {path} must contain a mapping")
            return {}
        return data

    @classmethod
    def register(cls, name: str, provider_class: Type[BaseProvider], argument: str) -> None:
        """
        Register a custom provider type.

        Args:
            name: Type name used in the ``providers`` section
            provider_class: Adapter class taking ``(argument, settings=...)``
            argument: Config key holding the adapter's first argument
        """
        cls.PROVIDER_MAP = {**cls.PROVIDER_MAP, name: provider_class}
        cls.PROVIDER_ARGUMENTS = {**cls.PROVIDER_ARGUMENTS, name: argument}

    def get_settings(self) -> Dict[str, Any]:
        """Get the raw configuration."""
        return self.config

    def get_updater_settings(self) -> UpdaterSettings:
        return UpdaterSettings.from_dict(self.config.get('updater'))

    def get_provider_specs(self) -> List[Dict[str, Any]]:
        """Get the provider entries in priority order."""
        specs = self.config.get('providers') or []
        if not isinstance(specs, list):
            self.logger.error("The 'providers' section must be a list")
            return []
        return specs

    def list_provider_types(self) -> List[str]:
        """List all available provider types."""
        return list(self.PROVIDER_MAP.keys())

    def create_provider(self, spec: Dict[str, Any]) -> Optional[BaseProvider]:
        """
        Instantiate the provider described by one config entry.

        Args:
            spec: Entry such as ``{'type': 'github', 'repo': 'owner/name'}``

        Returns:
            Provider instance or None if the entry is invalid
        """
        if not isinstance(spec, dict):
            self.logger.error(f"Invalid provider entry: {spec!r}")
            return None

        provider_type = str(spec.get('type', '')).lower()
        provider_class = self.PROVIDER_MAP.get(provider_type)
        if not provider_class:
            self.logger.error(f"Unknown provider type '{provider_type}'")
            return None

        argument = self.PROVIDER_ARGUMENTS[provider_type]
        value = spec.get(argument)
        if value in (None, ''):
            self.logger.error(f"Provider '{provider_type}' requires '{argument}'")
            return None

        return provider_class(value, settings=self.config)

    def get_providers(self) -> List[BaseProvider]:
        """Instantiate every valid provider entry, skipping invalid ones."""
        providers = []
        for spec in self.get_provider_specs():
            provider = self.create_provider(spec)
            if provider is not None:
                providers.append(provider)
        return providers

    def create_updater_builder(
        self,
        current_version: str,
        publish: Optional[Callable[[Any], Any]] = None,
        audience: Iterable[AudienceMember] = ()
    ) -> UpdaterBuilder:
        """
        Create a builder populated from the configuration.

        Args:
            current_version: Locally installed version
            publish: Event publisher passed to the updater
            audience: Initial audience members

        Returns:
            UpdaterBuilder ready for further configuration or build()
        """
        builder = UpdaterBuilder(current_version, publish=publish)
        builder.apply_settings(self.get_updater_settings())
        for provider in self.get_providers():
            builder.add_provider(provider)
        builder.add_audience(audience)
        return builder

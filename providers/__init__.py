"""
Providers package - Contains all remote version source implementations.
"""

from providers.base_provider import BaseProvider
from providers.github_provider import GithubProvider
from providers.bukkit_provider import BukkitProvider
from providers.polymart_provider import PolymartProvider

__all__ = [
    'BaseProvider',
    'GithubProvider',
    'BukkitProvider',
    'PolymartProvider',
]

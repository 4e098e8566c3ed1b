"""
Provider name normalization.

Modules:
    registry - ProviderRegistry: ids, labels, service lists, redirect links
"""

from .registry import ProviderRegistry, get_provider_registry

__all__ = [
    'ProviderRegistry',
    'get_provider_registry',
]

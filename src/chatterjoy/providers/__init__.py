"""
Provider access layer.

Components:
- ProviderClient: single-attempt JSON-over-HTTP client returning explicit outcomes
"""

from chatterjoy.providers.client import ProviderClient

__all__ = [
    "ProviderClient",
]

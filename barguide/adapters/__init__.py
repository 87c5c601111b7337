"""
Adapters for barguide ports.
"""

from .bar_catalog import InMemoryBarCatalog, YamlBarCatalog

__all__ = [
    "InMemoryBarCatalog",
    "YamlBarCatalog",
]

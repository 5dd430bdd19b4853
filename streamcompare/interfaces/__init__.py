# interfaces/__init__.py
"""
Interfaces Package

Contains data sources:
- catalog_store: Read-only services/channels/mappings snapshot
"""

from .catalog_store import CatalogStore, Channel

__all__ = [
    "CatalogStore",
    "Channel",
]

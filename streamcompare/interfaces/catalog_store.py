# interfaces/catalog_store.py
"""
Catalog Store - read-only snapshot of the streaming catalog.

Loads services, channels and service-channel mappings from a JSON file
exported from the admin database:

    {
        "services": [{"id": 1, "name": "...", "monthly_price": 9.99, ...}],
        "channels": [{"id": 1, "name": "...", "category": "News", "popularity": 80}],
        "service_channels": [{"service_id": 1, "channel_id": 1, "tier": "base"}]
    }
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger

from ..algorithms.service_scorer import Service, ServiceChannel, build_channel_index


# Tier reported for mappings that do not name one
DEFAULT_TIER = "standard"

# Size of the related-services list on a service page
MAX_RELATED_SERVICES = 3


@dataclass
class Channel:
    """A channel in the catalog"""
    id: int
    name: str
    category: str = ""
    popularity: float = 0
    logo_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Channel":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        channel = cls(**known)
        channel.id = int(channel.id)
        channel.popularity = float(channel.popularity or 0)
        channel.category = channel.category or ""
        return channel


class CatalogStore:
    """
    In-memory catalog loaded from a JSON snapshot

    Usage:
        store = CatalogStore("data/catalog.json")
        services = store.fetch_services()
        mappings = store.fetch_service_channel_mappings()
    """

    def __init__(self, catalog_path: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        """
        Initialize the store

        Args:
            catalog_path: JSON file to load
            data: Already-parsed catalog dict (takes precedence over the file)
        """
        self.catalog_path = Path(catalog_path) if catalog_path else None

        self._services: List[Service] = []
        self._channels: List[Channel] = []
        self._mappings: List[ServiceChannel] = []

        if data is not None:
            self._load_data(data)
        elif self.catalog_path is not None:
            self._load_file()

        logger.info(
            f"CatalogStore ready: {len(self._services)} services, "
            f"{len(self._channels)} channels, {len(self._mappings)} mappings"
        )

    def _load_file(self):
        """Load the catalog JSON file"""
        if not self.catalog_path.exists():
            logger.warning(f"Catalog file not found: {self.catalog_path}")
            logger.warning("Starting with an empty catalog.")
            return

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._load_data(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error loading catalog {self.catalog_path}: {e}")
            raise

    def _load_data(self, data: Dict[str, Any]):
        self._services = [Service.from_dict(s) for s in data.get("services", [])]
        self._channels = [Channel.from_dict(c) for c in data.get("channels", [])]
        self._mappings = [ServiceChannel.from_dict(m) for m in data.get("service_channels", [])]

    # ============================================
    # Fetch Methods
    # ============================================

    def fetch_services(self) -> List[Service]:
        """All services, most expensive first"""
        return sorted(self._services, key=lambda s: s.monthly_price, reverse=True)

    def fetch_channels(self) -> List[Channel]:
        """All channels, most popular first"""
        return sorted(self._channels, key=lambda c: c.popularity, reverse=True)

    def fetch_service_channel_mappings(self) -> List[ServiceChannel]:
        """All service-channel associations"""
        return list(self._mappings)

    # ============================================
    # Lookups
    # ============================================

    def get_service(self, service_id: int) -> Optional[Service]:
        for service in self._services:
            if service.id == service_id:
                return service
        return None

    def services_with_channel_count(self) -> List[Tuple[Service, int]]:
        """Every service paired with how many distinct channels it carries"""
        channel_index = build_channel_index(self._mappings)
        return [(s, len(channel_index.get(s.id, ()))) for s in self.fetch_services()]

    def channels_for_service(self, service_id: int) -> List[Tuple[Channel, str]]:
        """
        Channels a service carries, most popular first

        Args:
            service_id: Service to look up

        Returns:
            List[Tuple[Channel, str]]: (channel, tier) pairs; tier defaults to
                                       "standard". Empty for unknown services.
        """
        tiers = {}
        for mapping in self._mappings:
            if mapping.service_id == service_id:
                tiers.setdefault(mapping.channel_id, mapping.tier or DEFAULT_TIER)

        return [(c, tiers[c.id]) for c in self.fetch_channels() if c.id in tiers]

    def related_services(self, service_id: int, limit: int = MAX_RELATED_SERVICES) -> List[Service]:
        """
        Other services sharing the most channels with this one

        A service that carries no channels gets the first other services in
        the catalog instead.

        Args:
            service_id: Service to compare against
            limit: Maximum number of services to return

        Returns:
            List[Service]: Highest channel overlap first, ties by lowest id
        """
        channel_index = build_channel_index(self._mappings)
        own = set(channel_index.get(service_id, ()))

        if not own:
            return [s for s in self._services if s.id != service_id][:limit]

        overlap = {}
        for other_id, channel_ids in channel_index.items():
            if other_id == service_id:
                continue
            shared = len(own.intersection(channel_ids))
            if shared:
                overlap[other_id] = shared

        ranked_ids = sorted(overlap, key=lambda sid: (-overlap[sid], sid))
        services = {s.id: s for s in self._services}
        related = [services[sid] for sid in ranked_ids if sid in services][:limit]

        logger.debug(f"Related to service {service_id}: {[s.id for s in related]}")
        return related

    def get_channel_map(self) -> Dict[int, Channel]:
        """Channel id -> Channel"""
        return {channel.id: channel for channel in self._channels}

    def channel_categories(self) -> List[str]:
        """Distinct channel categories, sorted, with "all" first"""
        categories = {channel.category for channel in self._channels if channel.category}
        return ["all"] + sorted(categories)

    def list_channels(self, category: Optional[str] = None, query: Optional[str] = None) -> List[Channel]:
        """
        Channels filtered by category and name search

        Args:
            category: Exact category, or None / "all" for every category
            query: Case-insensitive substring of the channel name

        Returns:
            List[Channel]: Matching channels, most popular first
        """
        channels = self.fetch_channels()

        if category and category != "all":
            channels = [c for c in channels if c.category == category]

        if query:
            needle = query.lower()
            channels = [c for c in channels if needle in c.name.lower()]

        return channels

    def counts(self) -> Dict[str, int]:
        return {
            "services": len(self._services),
            "channels": len(self._channels),
            "service_channels": len(self._mappings),
        }

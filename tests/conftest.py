from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple

import pytest

from streamcompare.algorithms.service_scorer import Service, ServiceChannel


ServiceRow = Tuple[int, float, Iterable[int]]


@pytest.fixture()
def make_catalog() -> Callable[..., Tuple[List[Service], List[ServiceChannel]]]:
    """Build services and mappings from (id, price, channel ids) tuples."""

    def _make(
        rows: Iterable[ServiceRow],
        max_streams: int = 2,
        has_ads: bool = False,
    ) -> Tuple[List[Service], List[ServiceChannel]]:
        services = []
        mappings = []
        for service_id, price, channel_ids in rows:
            services.append(
                Service(
                    id=service_id,
                    name=f"Service {service_id}",
                    monthly_price=price,
                    max_streams=max_streams,
                    has_ads=has_ads,
                )
            )
            mappings.extend(ServiceChannel(service_id, channel_id) for channel_id in channel_ids)
        return services, mappings

    return _make


@pytest.fixture()
def catalog_data() -> Dict[str, list]:
    return {
        "services": [
            {"id": 1, "name": "Alpha", "monthly_price": 10.0, "max_streams": 2, "has_ads": False,
             "features": ["Cloud DVR"]},
            {"id": 2, "name": "Beta", "monthly_price": 15.0, "max_streams": 2, "has_ads": False},
            {"id": 3, "name": "Gamma", "monthly_price": 8.0, "max_streams": 2, "has_ads": False},
        ],
        "channels": [
            {"id": 1, "name": "ESPN", "category": "Sports", "popularity": 90},
            {"id": 2, "name": "CNN", "category": "News", "popularity": 80},
            {"id": 3, "name": "HGTV", "category": "Lifestyle", "popularity": 70},
            {"id": 4, "name": "Fox News", "category": "News", "popularity": 95},
        ],
        "service_channels": [
            {"service_id": 1, "channel_id": 1},
            {"service_id": 1, "channel_id": 2},
            {"service_id": 1, "channel_id": 3},
            {"service_id": 2, "channel_id": 2},
            {"service_id": 2, "channel_id": 3},
            {"service_id": 2, "channel_id": 4},
            {"service_id": 3, "channel_id": 1},
        ],
    }

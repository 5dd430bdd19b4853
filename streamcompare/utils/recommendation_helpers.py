"""
Recommendation Helper Utilities
Presentation-side helpers for scored services and bundles
"""

import math
from typing import Dict, Iterable, List, Sequence

from ..algorithms.service_scorer import ScoredService
from ..algorithms.bundle_finder import Bundle
from ..interfaces.catalog_store import Channel


def format_price(price: float) -> str:
    """
    Format price as currency string

    Returns:
        str: Formatted price (e.g., "$12.99")
    """
    return f"${price:.2f}"


def coverage_percent(coverage: float) -> int:
    """
    Coverage fraction as a whole percentage, halves rounded up

    Example:
        >>> coverage_percent(0.125)
        13
    """
    return int(math.floor(coverage * 100 + 0.5))


def get_channel_names(channel_ids: Iterable[int], channel_map: Dict[int, Channel]) -> List[str]:
    """
    Channel names for ids, alphabetically; unknown ids show as "Channel <id>"
    """
    names = []
    for channel_id in channel_ids:
        channel = channel_map.get(channel_id)
        names.append(channel.name if channel else f"Channel {channel_id}")
    return sorted(names)


def get_missing_channels(
    scored: ScoredService,
    channels: Sequence[Channel],
    selected_channel_ids: Iterable[int]
) -> List[str]:
    """
    Names of selected channels the service does not carry

    Args:
        scored: Scored service
        channels: Channel catalog, in display order
        selected_channel_ids: The user's selection

    Returns:
        List[str]: Missing channel names in catalog order
    """
    selected = set(selected_channel_ids)
    carried = set(scored.service_channel_ids)
    return [c.name for c in channels if c.id in selected and c.id not in carried]


def has_full_coverage(recommendations: Sequence[ScoredService], selected_channel_ids: Iterable[int]) -> bool:
    """True when the top recommendation carries every selected channel"""
    selected = set(selected_channel_ids)
    if not recommendations or not selected:
        return False
    return recommendations[0].selected_channels_count == len(selected)


def explain_service(scored: ScoredService, selected_count: int) -> str:
    """
    One-line explanation for a single-service recommendation

    Example:
        "Includes 3 of your 4 selected channels. Ad-free, 4 simultaneous streams"
    """
    text = f"Includes {scored.selected_channels_count} of your {selected_count} selected channels"
    if selected_count and scored.selected_channels_count == selected_count:
        text += " (100% coverage)"

    extras = []
    if not scored.service.has_ads:
        extras.append("Ad-free")
    extras.append(f"{scored.service.max_streams} simultaneous streams")
    if scored.service.features:
        extras.append(scored.service.features[0])

    return text + ". " + ", ".join(extras)


def explain_bundle(bundle: Bundle, selected_count: int) -> str:
    """
    Why-this-bundle text

    Example:
        "Covers 100% of your selected channels (4 of 4). Total monthly cost of $20.00 for 2 services"
    """
    return (
        f"Covers {coverage_percent(bundle.coverage_percentage)}% of your selected channels "
        f"({bundle.covered_channel_count} of {selected_count}). "
        f"Total monthly cost of {format_price(bundle.total_price)} for {bundle.size} services"
    )

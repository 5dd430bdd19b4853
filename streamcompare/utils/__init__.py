"""
Utilities Module
Helper functions for recommendation responses
"""

from .recommendation_helpers import (
    format_price,
    coverage_percent,
    get_channel_names,
    get_missing_channels,
    has_full_coverage,
    explain_service,
    explain_bundle
)

__all__ = [
    "format_price",
    "coverage_percent",
    "get_channel_names",
    "get_missing_channels",
    "has_full_coverage",
    "explain_service",
    "explain_bundle"
]

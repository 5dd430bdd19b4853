"""
Recommendation Algorithms Module
Service scoring and bundle search
"""

from .combinations import k_combinations, count_combinations
from .service_scorer import (
    Service,
    ServiceChannel,
    ScoredService,
    PreferenceWeights,
    InvalidPreferenceWeights,
    score_services,
    rank_services,
    score_and_rank,
)
from .bundle_finder import (
    Bundle,
    BundleFinder,
    BundleSearchResult,
    BundleSearchStatus,
    find_bundles,
    recommend_bundles,
)

__all__ = [
    "k_combinations",
    "count_combinations",
    "Service",
    "ServiceChannel",
    "ScoredService",
    "PreferenceWeights",
    "InvalidPreferenceWeights",
    "score_services",
    "rank_services",
    "score_and_rank",
    "Bundle",
    "BundleFinder",
    "BundleSearchResult",
    "BundleSearchStatus",
    "find_bundles",
    "recommend_bundles",
]

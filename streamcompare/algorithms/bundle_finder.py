"""
Bundle Finder - Multi-Service Bundle Recommendation Engine
Combines 2 or 3 streaming services to cover a user's channels when no single
service carries them all.

Pipeline:
1. Candidates - top 8 ranked services that carry at least one selected channel
2. Combinations - every 2- and 3-service subset of the candidates
3. Coverage filter - keep bundles covering at least 80% of selected channels
4. Value ranking - coverage per dollar
5. Display ordering - coverage first, cheaper wins within 5 points
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
from loguru import logger

from .combinations import k_combinations, count_combinations
from .service_scorer import ScoredService


# Candidate cap before enumeration. C(8, 3) = 56 keeps the search cheap.
MAX_BUNDLE_CANDIDATES = 8

BUNDLE_SIZES: Tuple[int, ...] = (2, 3)

# Hard cutoff, inclusive
MIN_BUNDLE_COVERAGE = 0.80

# Coverage gap under which price decides the display order
COVERAGE_TIE_TOLERANCE = 0.05

MAX_BUNDLES = 3


class BundleSearchStatus(str, Enum):
    NOT_ATTEMPTED = "not_attempted"  # fewer than 2 candidates
    NONE_FOUND = "none_found"        # searched, nothing reached the threshold
    FOUND = "found"


@dataclass
class Bundle:
    """A combination of services scored against one channel selection"""
    services: List[ScoredService]
    covered_channel_count: int
    coverage_percentage: float
    total_price: float
    value_score: float
    unique_channels: Dict[int, List[int]] = field(default_factory=dict)

    @property
    def service_ids(self) -> List[int]:
        return [s.id for s in self.services]

    @property
    def size(self) -> int:
        return len(self.services)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "service_ids": self.service_ids,
            "covered_channel_count": self.covered_channel_count,
            "coverage_percentage": self.coverage_percentage,
            "total_price": self.total_price,
            "value_score": self.value_score,
            "unique_channels": {sid: list(ids) for sid, ids in self.unique_channels.items()},
        }

    def __repr__(self) -> str:
        return (
            f"Bundle(services={self.service_ids}, "
            f"coverage={self.coverage_percentage:.2f}, "
            f"price={self.total_price:.2f}, "
            f"value={self.value_score:.4f})"
        )


@dataclass
class BundleSearchResult:
    """Bundles plus how the search ended"""
    status: BundleSearchStatus
    bundles: List[Bundle] = field(default_factory=list)
    candidates_considered: int = 0
    combinations_evaluated: int = 0


class BundleFinder:
    """
    Bundle search over ranked services

    Usage:
        finder = BundleFinder()
        result = finder.search(ranked_services, selected_channel_ids)
        for bundle in result.bundles:
            ...
    """

    def __init__(
        self,
        max_candidates: int = MAX_BUNDLE_CANDIDATES,
        bundle_sizes: Sequence[int] = BUNDLE_SIZES,
        max_bundles: int = MAX_BUNDLES
    ):
        """
        Initialize Bundle Finder

        Args:
            max_candidates: How many top-ranked services to combine (default: 8)
            bundle_sizes: Subset sizes to search (default: 2 and 3)
            max_bundles: Number of bundles to return (default: 3)
        """
        self.max_candidates = max_candidates
        self.bundle_sizes = tuple(bundle_sizes)
        self.max_bundles = max_bundles

    def search(
        self,
        scored_services: Sequence[ScoredService],
        selected_channel_ids: Iterable[int]
    ) -> BundleSearchResult:
        """
        Find the best bundles for a selection

        Args:
            scored_services: Services ranked by weighted score, highest first
            selected_channel_ids: Channels the user must have

        Returns:
            BundleSearchResult: Status and up to max_bundles bundles
        """
        selected = tuple(sorted(set(selected_channel_ids)))
        if not selected:
            logger.info("No channels selected, bundle search not attempted")
            return BundleSearchResult(status=BundleSearchStatus.NOT_ATTEMPTED)

        candidates = self._select_candidates(scored_services)
        if len(candidates) < 2:
            logger.info(f"Only {len(candidates)} candidate service(s), bundle search not attempted")
            return BundleSearchResult(
                status=BundleSearchStatus.NOT_ATTEMPTED,
                candidates_considered=len(candidates)
            )

        logger.info(
            f"Searching bundles: {len(candidates)} candidates, sizes {list(self.bundle_sizes)}, "
            f"{sum(count_combinations(len(candidates), k) for k in self.bundle_sizes)} combinations"
        )

        bundles: List[Bundle] = []
        evaluated = 0
        for size in self.bundle_sizes:
            sized, count = self._bundles_of_size(candidates, size, selected)
            bundles.extend(sized)
            evaluated += count

        bundles.sort(key=lambda b: b.value_score, reverse=True)
        top_bundles = order_for_display(bundles)[:self.max_bundles]

        logger.info(
            f"Kept {len(bundles)} of {evaluated} bundles at >= {MIN_BUNDLE_COVERAGE:.0%} coverage, "
            f"returning {len(top_bundles)}"
        )

        return BundleSearchResult(
            status=BundleSearchStatus.FOUND if top_bundles else BundleSearchStatus.NONE_FOUND,
            bundles=top_bundles,
            candidates_considered=len(candidates),
            combinations_evaluated=evaluated
        )

    def find_bundles(
        self,
        scored_services: Sequence[ScoredService],
        selected_channel_ids: Iterable[int]
    ) -> List[Bundle]:
        """Same as search(), bundles only"""
        return self.search(scored_services, selected_channel_ids).bundles

    def _select_candidates(self, scored_services: Sequence[ScoredService]) -> List[ScoredService]:
        """Services carrying at least one selected channel, capped to the top N"""
        eligible = [s for s in scored_services if s.selected_channels_count > 0]
        return eligible[:self.max_candidates]

    def _bundles_of_size(
        self,
        candidates: Sequence[ScoredService],
        size: int,
        selected: Tuple[int, ...]
    ) -> Tuple[List[Bundle], int]:
        """
        Build and filter every bundle of one size

        Returns:
            tuple: (bundles sorted by value score, combinations evaluated)
        """
        results = []
        evaluated = 0
        for combo in k_combinations(candidates, size):
            evaluated += 1
            bundle = self._create_bundle(combo, selected)
            if bundle:
                results.append(bundle)

        results.sort(key=lambda b: b.value_score, reverse=True)
        return results, evaluated

    def _create_bundle(
        self,
        combo: Sequence[ScoredService],
        selected: Tuple[int, ...]
    ) -> Optional[Bundle]:
        """
        Score one combination

        Returns:
            Bundle if it clears the coverage threshold, None otherwise
        """
        selected_set = set(selected)
        covered = set()
        for service in combo:
            covered.update(cid for cid in service.service_channel_ids if cid in selected_set)

        coverage = len(covered) / max(1, len(selected))
        if coverage < MIN_BUNDLE_COVERAGE:
            return None

        total_price = sum(service.monthly_price for service in combo)
        if total_price <= 0:
            logger.debug(f"Skipping zero-price bundle {[s.id for s in combo]}")
            return None

        bundle = Bundle(
            services=list(combo),
            covered_channel_count=len(covered),
            coverage_percentage=coverage,
            total_price=total_price,
            value_score=coverage / total_price,
            unique_channels=calculate_unique_channels(combo, selected)
        )
        logger.debug(f"Bundle created: {bundle}")
        return bundle


# ============================================
# Helpers
# ============================================

def calculate_unique_channels(
    services: Sequence[ScoredService],
    selected_channel_ids: Iterable[int]
) -> Dict[int, List[int]]:
    """
    Channels carried by exactly one member of the bundle, per member

    Channels carried by none or by several members are attributed to nobody.

    Example:
        A carries {1, 2}, B carries {2, 3}, selected = {1, 2, 3}
        -> {A: [1], B: [3]}
    """
    result: Dict[int, List[int]] = {service.id: [] for service in services}
    channel_sets = [(service.id, set(service.service_channel_ids)) for service in services]

    for channel_id in sorted(set(selected_channel_ids)):
        holders = [service_id for service_id, ids in channel_sets if channel_id in ids]
        if len(holders) == 1:
            result[holders[0]].append(channel_id)

    return result


def _compare_for_display(a: Bundle, b: Bundle) -> float:
    if abs(b.coverage_percentage - a.coverage_percentage) < COVERAGE_TIE_TOLERANCE:
        return a.total_price - b.total_price
    return b.coverage_percentage - a.coverage_percentage


def order_for_display(bundles: Sequence[Bundle]) -> List[Bundle]:
    """
    Presentation order: higher coverage first; when coverage differs by less
    than 5 points the cheaper bundle wins. Stable for equal bundles.
    """
    return sorted(bundles, key=cmp_to_key(_compare_for_display))


# ============================================
# Convenience Functions
# ============================================

def find_bundles(
    scored_services: Sequence[ScoredService],
    selected_channel_ids: Iterable[int]
) -> List[Bundle]:
    """Best bundles with the default limits"""
    return BundleFinder().find_bundles(scored_services, selected_channel_ids)


def recommend_bundles(
    ranked_services: Sequence[ScoredService],
    selected_channel_ids: Iterable[int]
) -> Dict[str, Any]:
    """
    Bundle recommendations for presentation code

    Returns:
        dict: {"bundles": List[Bundle], "status": "not_attempted" | "none_found" | "found"}
    """
    result = BundleFinder().search(ranked_services, selected_channel_ids)
    return {"bundles": result.bundles, "status": result.status.value}

"""
Service Score Algorithm
Ranks streaming services against a user's must-have channels (0.0-3.0)

Algorithm Components:
1. Coverage Score (0.0-1.0) - Share of selected channels the service carries
2. Price Score (0.0-1.0)    - Cheaper is better, $100/month and above scores 0
3. Features Score (0.0-1.0) - Simultaneous streams and ad-free viewing

Each component is scaled by the user's importance weight (1-10) divided by 10
and summed into a single weighted score.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple
from loguru import logger


# Reference ceiling for price normalization ($/month). Fixed, not learned.
PRICE_CEILING = 100.0

# Stream counts above this are treated as equal
MAX_STREAMS_CAP = 10

# Size of the single-service recommendation list
MAX_RECOMMENDATIONS = 5

WEIGHT_MIN = 1
WEIGHT_MAX = 10


class InvalidPreferenceWeights(ValueError):
    """Raised when an importance weight is not an integer in [1, 10]"""


@dataclass
class Service:
    """Streaming service data structure"""
    id: int
    name: str
    monthly_price: float
    max_streams: int
    has_ads: bool
    features: List[str] = field(default_factory=list)
    logo_url: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        service = cls(**known)
        service.id = int(service.id)
        service.monthly_price = float(service.monthly_price)
        service.max_streams = int(service.max_streams)
        service.has_ads = _coerce_flag(service.has_ads, "has_ads")
        service.features = list(service.features or [])
        return service


def _coerce_flag(value: Any, name: str) -> bool:
    """Accept booleans and 0/1 only; strings such as "false" are rejected"""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class ServiceChannel:
    """Service-to-channel association"""
    service_id: int
    channel_id: int
    tier: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceChannel":
        return cls(
            service_id=int(data["service_id"]),
            channel_id=int(data["channel_id"]),
            tier=data.get("tier"),
        )


class PreferenceWeights(NamedTuple):
    """User importance weights, each 1-10"""
    price: int = 5
    coverage: int = 8
    features: int = 3


@dataclass
class ScoredService:
    """A service annotated with its sub-scores for one selection"""
    service: Service
    service_channel_ids: Tuple[int, ...]
    selected_channels_count: int
    coverage_percentage: float
    price_score: float
    features_score: float
    weighted_score: float

    @property
    def id(self) -> int:
        return self.service.id

    @property
    def name(self) -> str:
        return self.service.name

    @property
    def monthly_price(self) -> float:
        return self.service.monthly_price

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.service.to_dict(),
            "service_channel_ids": list(self.service_channel_ids),
            "selected_channels_count": self.selected_channels_count,
            "coverage_percentage": self.coverage_percentage,
            "price_score": self.price_score,
            "features_score": self.features_score,
            "weighted_score": self.weighted_score,
        }

    def __repr__(self) -> str:
        return (
            f"ScoredService(id={self.id}, "
            f"weighted={self.weighted_score:.3f}, "
            f"coverage={self.coverage_percentage:.2f}, "
            f"price={self.price_score:.2f}, "
            f"features={self.features_score:.2f})"
        )


def validate_weights(weights: PreferenceWeights) -> PreferenceWeights:
    """
    Reject weights outside [1, 10]

    Raises:
        InvalidPreferenceWeights: If any weight is not an int in range
    """
    for name, value in weights._asdict().items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPreferenceWeights(f"{name} weight must be an integer, got {value!r}")
        if not WEIGHT_MIN <= value <= WEIGHT_MAX:
            raise InvalidPreferenceWeights(
                f"{name} weight must be between {WEIGHT_MIN} and {WEIGHT_MAX}, got {value}"
            )
    return weights


def build_channel_index(mappings: Iterable[ServiceChannel]) -> Dict[int, Tuple[int, ...]]:
    """
    Group mappings into service id -> sorted channel ids

    Args:
        mappings: Service-channel associations

    Returns:
        dict: Channel ids per service, ascending
    """
    grouped: Dict[int, set] = {}
    for mapping in mappings:
        grouped.setdefault(mapping.service_id, set()).add(mapping.channel_id)
    return {service_id: tuple(sorted(ids)) for service_id, ids in grouped.items()}


def score_services(
    services: Sequence[Service],
    mappings: Iterable[ServiceChannel],
    selected_channel_ids: Iterable[int],
    weights: PreferenceWeights
) -> List[ScoredService]:
    """
    Score every service for a channel selection

    Args:
        services: Services to score
        mappings: All service-channel associations
        selected_channel_ids: Channels the user must have
        weights: Importance weights for price, coverage and features

    Returns:
        List[ScoredService]: One entry per input service, in input order

    Example:
        >>> scored = score_services(
        ...     services=[Service(1, "A", 10.0, 2, False)],
        ...     mappings=[ServiceChannel(1, 1), ServiceChannel(1, 2)],
        ...     selected_channel_ids={1, 2, 3, 4},
        ...     weights=PreferenceWeights(price=1, coverage=10, features=1)
        ... )
        >>> scored[0].selected_channels_count
        2
    """
    validate_weights(weights)

    selected = frozenset(selected_channel_ids)
    denominator = max(1, len(selected))
    channel_index = build_channel_index(mappings)

    scored = []
    for service in services:
        channel_ids = channel_index.get(service.id, ())
        match_count = sum(1 for channel_id in channel_ids if channel_id in selected)

        coverage = match_count / denominator
        price_score = calculate_price_score(service.monthly_price)
        features_score = calculate_features_score(service.max_streams, service.has_ads)

        scored_service = ScoredService(
            service=service,
            service_channel_ids=channel_ids,
            selected_channels_count=match_count,
            coverage_percentage=coverage,
            price_score=price_score,
            features_score=features_score,
            weighted_score=calculate_weighted_score(coverage, price_score, features_score, weights),
        )
        logger.debug(f"Service scored: {scored_service}")
        scored.append(scored_service)

    return scored


def calculate_price_score(monthly_price: float) -> float:
    """
    Calculate price score (0.0-1.0)

    Logic:
    - $0/month: 1.0
    - Linear down to $100/month
    - $100/month or more: 0.0
    """
    return 1 - min(monthly_price / PRICE_CEILING, 1)


def calculate_features_score(max_streams: int, has_ads: bool) -> float:
    """
    Calculate features score (0.0-1.0)

    Average of the stream allowance (capped at 10, normalized) and an
    ad-free bonus (1.0 without ads, 0.0 with ads).
    """
    streams_score = min(max_streams, MAX_STREAMS_CAP) / MAX_STREAMS_CAP
    ads_score = 0.0 if has_ads else 1.0
    return (streams_score + ads_score) / 2


def calculate_weighted_score(
    coverage: float,
    price_score: float,
    features_score: float,
    weights: PreferenceWeights
) -> float:
    """Combine the three sub-scores with importance weights scaled to 0.1-1.0"""
    return (
        coverage * (weights.coverage / 10) +
        price_score * (weights.price / 10) +
        features_score * (weights.features / 10)
    )


# ============================================
# Ranking
# ============================================

def rank_services(scored_services: Sequence[ScoredService]) -> List[ScoredService]:
    """
    Sort by weighted score (highest first) and drop services that carry
    none of the selected channels. Ties keep their input order.
    """
    ranked = sorted(scored_services, key=lambda s: s.weighted_score, reverse=True)
    return [s for s in ranked if s.selected_channels_count > 0]


def score_and_rank(
    services: Sequence[Service],
    mappings: Iterable[ServiceChannel],
    selected_channel_ids: Iterable[int],
    weights: Optional[PreferenceWeights] = None,
    limit: int = MAX_RECOMMENDATIONS
) -> Dict[str, List[ScoredService]]:
    """
    Score, rank and cut the single-service recommendation list

    Args:
        services: Catalog services
        mappings: Service-channel associations
        selected_channel_ids: Channels the user must have
        weights: Importance weights (defaults to price 5, coverage 8, features 3)
        limit: Number of recommendations to return

    Returns:
        dict: {"recommendations": top services, "ranked": full filtered ranking}
              Both are empty when no channels are selected.
    """
    weights = weights or PreferenceWeights()
    selected = sorted(set(selected_channel_ids))

    if not selected:
        validate_weights(weights)
        logger.info("No channels selected, skipping scoring")
        return {"recommendations": [], "ranked": []}

    scored = score_services(services, mappings, selected, weights)
    ranked = rank_services(scored)

    logger.info(
        f"Scored {len(scored)} services for {len(selected)} channels: "
        f"{len(ranked)} cover at least one, returning top {min(limit, len(ranked))}"
    )

    return {"recommendations": ranked[:limit], "ranked": ranked}

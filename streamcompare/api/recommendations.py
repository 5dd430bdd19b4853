# api/recommendations.py
"""
/recommendations HTTP API Endpoint
Implements the channel-coverage recommendation endpoints.

POST /api/recommendations         - Top services plus bundles for a selection
POST /api/recommendations/bundles - Bundles only
"""

from datetime import datetime, timezone
from typing import Dict, List, Sequence, Tuple
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from ..algorithms.bundle_finder import Bundle, BundleFinder, BundleSearchResult
from ..algorithms.service_scorer import InvalidPreferenceWeights, ScoredService, score_and_rank
from ..interfaces.catalog_store import CatalogStore, Channel
from ..schemas.streaming_schemas import (
    BundleListResponse, BundleMember, BundleResponse,
    RecommendationRequest, RecommendationResponse, ScoredServiceResponse
)
from ..utils.recommendation_helpers import (
    explain_bundle, explain_service, get_channel_names,
    get_missing_channels, has_full_coverage
)
from .catalog import get_catalog_store


router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


# ============================================
# Helper Functions
# ============================================

def build_service_response(
    scored: ScoredService,
    channels: Sequence[Channel],
    selected: Sequence[int]
) -> ScoredServiceResponse:
    """Build a ScoredServiceResponse from a scored service"""
    return ScoredServiceResponse(
        **scored.service.to_dict(),
        selected_channels_count=scored.selected_channels_count,
        coverage_percentage=scored.coverage_percentage,
        price_score=scored.price_score,
        features_score=scored.features_score,
        weighted_score=round(scored.weighted_score, 4),
        missing_channels=get_missing_channels(scored, channels, selected),
        why_this=explain_service(scored, len(selected))
    )


def build_bundle_response(
    bundle: Bundle,
    channel_map: Dict[int, Channel],
    selected_count: int
) -> BundleResponse:
    """Build a BundleResponse with unique channel names per member"""
    members = []
    for service in bundle.services:
        unique_ids = bundle.unique_channels.get(service.id, [])
        members.append(BundleMember(
            service_id=service.id,
            name=service.name,
            monthly_price=service.monthly_price,
            logo_url=service.service.logo_url,
            unique_channel_ids=unique_ids,
            unique_channel_names=get_channel_names(unique_ids, channel_map)
        ))

    return BundleResponse(
        services=members,
        covered_channel_count=bundle.covered_channel_count,
        coverage_percentage=bundle.coverage_percentage,
        total_price=round(bundle.total_price, 2),
        value_score=round(bundle.value_score, 6),
        why_this=explain_bundle(bundle, selected_count)
    )


def run_recommendations(
    request: RecommendationRequest,
    store: CatalogStore
) -> Tuple[Dict[str, List[ScoredService]], BundleSearchResult, List[int]]:
    """Score the catalog and search bundles for one request"""
    selected = sorted(set(request.selected_channel_ids))

    try:
        ranking = score_and_rank(
            services=store.fetch_services(),
            mappings=store.fetch_service_channel_mappings(),
            selected_channel_ids=selected,
            weights=request.weights.to_weights()
        )
    except InvalidPreferenceWeights as e:
        logger.error(f"Rejected weights: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    bundle_result = BundleFinder().search(ranking["ranked"], selected)
    return ranking, bundle_result, selected


# ============================================
# API Endpoints
# ============================================

@router.post("", response_model=RecommendationResponse)
async def get_recommendations(
    request: RecommendationRequest,
    store: CatalogStore = Depends(get_catalog_store)
):
    """
    Recommend services for a set of must-have channels.

    Returns the top 5 single services and up to 3 bundles.
    """
    logger.info(
        f"POST /recommendations: {len(request.selected_channel_ids)} channels, "
        f"weights={request.weights.model_dump()}"
    )

    ranking, bundle_result, selected = run_recommendations(request, store)

    channels = store.fetch_channels()
    channel_map = {channel.id: channel for channel in channels}
    recommendations = ranking["recommendations"]

    return RecommendationResponse(
        recommendations=[build_service_response(s, channels, selected) for s in recommendations],
        has_full_coverage=has_full_coverage(recommendations, selected),
        bundles=[build_bundle_response(b, channel_map, len(selected)) for b in bundle_result.bundles],
        bundle_status=bundle_result.status,
        selected_count=len(selected),
        weights=request.weights,
        timestamp=datetime.now(timezone.utc).isoformat()
    )


@router.post("/bundles", response_model=BundleListResponse)
async def get_bundles(
    request: RecommendationRequest,
    store: CatalogStore = Depends(get_catalog_store)
):
    """
    Bundle recommendations only.

    status tells "not_attempted" (fewer than 2 services cover any selected
    channel) apart from "none_found" (no bundle reached 80% coverage).
    """
    logger.info(f"POST /recommendations/bundles: {len(request.selected_channel_ids)} channels")

    _, bundle_result, selected = run_recommendations(request, store)
    channel_map = store.get_channel_map()

    return BundleListResponse(
        bundles=[build_bundle_response(b, channel_map, len(selected)) for b in bundle_result.bundles],
        status=bundle_result.status,
        selected_count=len(selected),
        timestamp=datetime.now(timezone.utc).isoformat()
    )

# schemas/__init__.py
"""
Pydantic Schemas Package

Contains all Pydantic v2 models for API requests/responses
"""

from .streaming_schemas import (
    # Requests
    WeightsModel, RecommendationRequest,
    # Catalog
    ServiceInfo, ChannelInfo, ServiceChannelInfo,
    ServiceListResponse, ServiceChannelListResponse, ChannelListResponse,
    # Recommendations
    ScoredServiceResponse, BundleMember, BundleResponse,
    BundleListResponse, RecommendationResponse,
    # Health
    HealthResponse
)

__all__ = [
    # Requests
    "WeightsModel", "RecommendationRequest",
    # Catalog
    "ServiceInfo", "ChannelInfo", "ServiceChannelInfo",
    "ServiceListResponse", "ServiceChannelListResponse", "ChannelListResponse",
    # Recommendations
    "ScoredServiceResponse", "BundleMember", "BundleResponse",
    "BundleListResponse", "RecommendationResponse",
    # Health
    "HealthResponse"
]

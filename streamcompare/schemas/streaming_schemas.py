# schemas/streaming_schemas.py
"""
Pydantic v2 schemas for the Recommendation Service API
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from ..algorithms.bundle_finder import BundleSearchStatus
from ..algorithms.service_scorer import PreferenceWeights, WEIGHT_MIN, WEIGHT_MAX
from ..config import settings


# ============================================
# Requests
# ============================================

class WeightsModel(BaseModel):
    """Importance weights from the preference sliders (1-10)"""
    price: int = Field(settings.DEFAULT_PRICE_WEIGHT, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    coverage: int = Field(settings.DEFAULT_COVERAGE_WEIGHT, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    features: int = Field(settings.DEFAULT_FEATURES_WEIGHT, ge=WEIGHT_MIN, le=WEIGHT_MAX)

    def to_weights(self) -> PreferenceWeights:
        return PreferenceWeights(price=self.price, coverage=self.coverage, features=self.features)


class RecommendationRequest(BaseModel):
    """Channels the user must have plus how they trade off price and features"""
    selected_channel_ids: List[int] = Field(default_factory=list, description="Must-have channel ids")
    weights: WeightsModel = Field(default_factory=WeightsModel)


# ============================================
# Catalog
# ============================================

class ServiceInfo(BaseModel):
    """Streaming service details"""
    id: int
    name: str
    monthly_price: float
    max_streams: int
    has_ads: bool
    features: List[str] = Field(default_factory=list)
    logo_url: Optional[str] = None
    description: Optional[str] = None
    channel_count: Optional[int] = None


class ChannelInfo(BaseModel):
    """Channel details"""
    id: int
    name: str
    category: str = ""
    popularity: float = 0
    logo_url: Optional[str] = None


class ServiceChannelInfo(ChannelInfo):
    """A channel as carried by one service"""
    tier: str = "standard"


class ServiceListResponse(BaseModel):
    services: List[ServiceInfo]
    total_count: int


class ServiceChannelListResponse(BaseModel):
    service_id: int
    channels: List[ServiceChannelInfo]
    total_count: int


class ChannelListResponse(BaseModel):
    channels: List[ChannelInfo]
    total_count: int
    category: Optional[str] = None
    query: Optional[str] = None


# ============================================
# Recommendations
# ============================================

class ScoredServiceResponse(ServiceInfo):
    """A recommended service with its scores"""
    selected_channels_count: int
    coverage_percentage: float = Field(..., ge=0, le=1)
    price_score: float
    features_score: float
    weighted_score: float
    missing_channels: List[str] = Field(default_factory=list)
    why_this: str = ""


class BundleMember(BaseModel):
    """One service inside a bundle"""
    service_id: int
    name: str
    monthly_price: float
    logo_url: Optional[str] = None
    unique_channel_ids: List[int] = Field(default_factory=list)
    unique_channel_names: List[str] = Field(default_factory=list)


class BundleResponse(BaseModel):
    """A 2- or 3-service bundle"""
    services: List[BundleMember]
    covered_channel_count: int
    coverage_percentage: float = Field(..., ge=0, le=1)
    total_price: float
    value_score: float
    why_this: str


class BundleListResponse(BaseModel):
    bundles: List[BundleResponse]
    status: BundleSearchStatus
    selected_count: int
    timestamp: str


class RecommendationResponse(BaseModel):
    """Single-service recommendations plus bundles"""
    recommendations: List[ScoredServiceResponse]
    has_full_coverage: bool
    bundles: List[BundleResponse]
    bundle_status: BundleSearchStatus
    selected_count: int
    weights: WeightsModel
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    catalog: dict
    timestamp: str

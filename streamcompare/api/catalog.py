# api/catalog.py
"""
/catalog HTTP API Endpoint
Read-only listing of the streaming catalog for the channel selector.

GET /api/catalog/services                 - All services with channel counts
GET /api/catalog/services/{id}            - One service
GET /api/catalog/services/{id}/channels   - Channels a service carries
GET /api/catalog/services/{id}/related    - Services sharing the most channels
GET /api/catalog/channels                 - Channels, filterable by category and name
GET /api/catalog/categories               - Channel categories
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from loguru import logger

from ..algorithms.service_scorer import Service
from ..interfaces.catalog_store import CatalogStore
from ..schemas.streaming_schemas import (
    ChannelInfo, ChannelListResponse, ServiceChannelInfo,
    ServiceChannelListResponse, ServiceInfo, ServiceListResponse
)


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_catalog_store(request: Request) -> CatalogStore:
    """Catalog snapshot attached to the running app"""
    return request.app.state.catalog_store


def require_service(service_id: int, store: CatalogStore) -> Service:
    service = store.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Service {service_id} not found")
    return service


@router.get("/services", response_model=ServiceListResponse)
async def list_services(store: CatalogStore = Depends(get_catalog_store)):
    """All streaming services, most expensive first"""
    services = [
        ServiceInfo(**s.to_dict(), channel_count=count)
        for s, count in store.services_with_channel_count()
    ]
    return ServiceListResponse(services=services, total_count=len(services))


@router.get("/services/{service_id}", response_model=ServiceInfo)
async def get_service(service_id: int, store: CatalogStore = Depends(get_catalog_store)):
    """Get a specific service by ID"""
    return ServiceInfo(**require_service(service_id, store).to_dict())


@router.get("/services/{service_id}/channels", response_model=ServiceChannelListResponse)
async def get_service_channels(service_id: int, store: CatalogStore = Depends(get_catalog_store)):
    """Channels carried by a service, most popular first"""
    require_service(service_id, store)
    channels = [
        ServiceChannelInfo(**channel.to_dict(), tier=tier)
        for channel, tier in store.channels_for_service(service_id)
    ]
    return ServiceChannelListResponse(service_id=service_id, channels=channels, total_count=len(channels))


@router.get("/services/{service_id}/related", response_model=ServiceListResponse)
async def get_related_services(service_id: int, store: CatalogStore = Depends(get_catalog_store)):
    """Up to 3 other services with the most channels in common"""
    require_service(service_id, store)
    services = [ServiceInfo(**s.to_dict()) for s in store.related_services(service_id)]
    return ServiceListResponse(services=services, total_count=len(services))


@router.get("/channels", response_model=ChannelListResponse)
async def list_channels(
    category: Optional[str] = Query(None, description="Category, or 'all'"),
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
    store: CatalogStore = Depends(get_catalog_store)
):
    """Channels, most popular first"""
    logger.info(f"GET /catalog/channels: category={category}, q={q}")
    channels = [ChannelInfo(**c.to_dict()) for c in store.list_channels(category=category, query=q)]
    return ChannelListResponse(channels=channels, total_count=len(channels), category=category, query=q)


@router.get("/categories")
async def list_categories(store: CatalogStore = Depends(get_catalog_store)):
    """Channel categories for the selector tabs"""
    return {"categories": store.channel_categories()}

# api/__init__.py
"""
API Endpoints Package

Contains all FastAPI routers for the recommendation service:
- recommendations: Single-service and bundle recommendations
- catalog: Read-only services/channels listing
"""

from .recommendations import router as recommendations_router
from .catalog import router as catalog_router, get_catalog_store

__all__ = [
    "recommendations_router",
    "catalog_router",
    "get_catalog_store"
]

"""
Streaming Recommendation Service - FastAPI Application
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import catalog_router, recommendations_router
from .config import settings
from .interfaces.catalog_store import CatalogStore
from .schemas.streaming_schemas import HealthResponse

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("=" * 50)
    logger.info("Starting Streaming Recommendation Service")
    logger.info("=" * 50)
    logger.info(f"Environment: {settings.API_ENV}")

    counts = app.state.catalog_store.counts()
    for name, count in counts.items():
        logger.info(f"  {name}: {count}")

    yield

    logger.info("Shutting down Streaming Recommendation Service")


def create_app(catalog_store: Optional[CatalogStore] = None) -> FastAPI:
    """
    Build the FastAPI app

    Args:
        catalog_store: Catalog to serve (default: loaded from settings.CATALOG_PATH)
    """
    app = FastAPI(
        title="Streaming Recommendation Service",
        description="Channel-coverage recommendations and service bundles for streaming services.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.catalog_store = catalog_store or CatalogStore(settings.CATALOG_PATH)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(recommendations_router)
    app.include_router(catalog_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": "Streaming Recommendation Service",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
            "endpoints": [
                "/api/health",
                "/api/recommendations",
                "/api/recommendations/bundles",
                "/api/catalog/services",
                "/api/catalog/services/{id}/channels",
                "/api/catalog/services/{id}/related",
                "/api/catalog/channels",
                "/api/catalog/categories"
            ]
        }

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check with catalog counts"""
        counts = request.app.state.catalog_store.counts()
        return HealthResponse(
            status="healthy" if counts["services"] else "degraded",
            service="streaming-recommendation-service",
            version=__version__,
            catalog=counts,
            timestamp=datetime.now(timezone.utc).isoformat()
        )

    return app


app = create_app()


# ============================================
# Main
# ============================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "streamcompare.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_ENV == "development"
    )

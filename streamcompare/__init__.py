# streamcompare/__init__.py
"""
Streaming Service Recommendation Package

Channel-coverage recommendation engine for a streaming comparison site:
- Service Scoring (coverage, price, features)
- Single-Service Recommendations
- Multi-Service Bundle Search
- Read-only Catalog API
"""

__version__ = "1.0.0"
__author__ = "StreamCompare Team"

# Package structure:
# streamcompare/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application entry
# ├── config.py             <- Configuration settings
# │
# ├── algorithms/           <- Recommendation engine (pure functions)
# │   ├── combinations.py   <- k-combinations generator
# │   ├── service_scorer.py <- Weighted service scoring + ranking
# │   └── bundle_finder.py  <- 2/3-service bundle search
# │
# ├── api/                  <- FastAPI Routers
# │   ├── recommendations.py <- /api/recommendations
# │   └── catalog.py        <- /api/catalog
# │
# ├── interfaces/           <- Data sources
# │   └── catalog_store.py  <- JSON snapshot of services/channels/mappings
# │
# ├── schemas/              <- Pydantic Models
# │   └── streaming_schemas.py
# │
# └── utils/                <- Presentation helpers
#     └── recommendation_helpers.py

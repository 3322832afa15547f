"""API routers for TubeSearch."""

from tubesearch.api.routes_health import router as health_router
from tubesearch.api.routes_search import router as search_router

__all__ = [
    "health_router",
    "search_router",
]

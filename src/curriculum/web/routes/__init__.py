"""Route handlers for Web API."""

from curriculum.web.routes.health import router as health_router
from curriculum.web.routes.languages import router as languages_router
from curriculum.web.routes.profiles import router as profiles_router
from curriculum.web.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "languages_router",
    "profiles_router",
    "reports_router",
]

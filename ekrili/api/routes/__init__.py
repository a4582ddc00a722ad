from ekrili.api.routes.auth import router as auth_router
from ekrili.api.routes.users import router as users_router
from ekrili.api.routes.properties import router as properties_router
from ekrili.api.routes.search import router as search_router
from ekrili.api.routes.bookings import router as bookings_router
from ekrili.api.routes.reviews import router as reviews_router
from ekrili.api.routes.messages import router as messages_router
from ekrili.api.routes.favorites import router as favorites_router
from ekrili.api.routes.stats import router as stats_router
from ekrili.api.routes.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "users_router",
    "properties_router",
    "search_router",
    "bookings_router",
    "reviews_router",
    "messages_router",
    "favorites_router",
    "stats_router",
    "dashboard_router",
]

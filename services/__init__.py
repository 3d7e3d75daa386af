# services/__init__.py
# auth_service needs JWT_SECRET at import time; import it directly where used
from .booking_service import BookingService
from .space_service import SpaceService
from .search_service import SpaceSearchFilters, parse_price_range, build_space_query, search_spaces
from .stats_service import compute_platform_stats
from .session_context import SessionContext

__all__ = [
     "BookingService",
     "SpaceService",
     "SpaceSearchFilters",
     "parse_price_range",
     "build_space_query",
     "search_spaces",
     "compute_platform_stats",
     "SessionContext",
]

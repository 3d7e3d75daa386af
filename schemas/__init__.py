# schemas/__init__.py
from .auth import RegisterRequest, LoginRequest, TokenResponse
from .profile import ProfileResponse, OwnerPublicProfile, ProfileUpdate, VerificationUpdate
from .space import SpaceCreate, SpaceUpdate, SpaceResponse, SpaceSearchResponse
from .booking import BookingCreate, BookingResponse, BookingListResponse
from .dashboard import PlatformStats, AdminOverviewResponse, DashboardResponse

__all__ = [
     "RegisterRequest",
     "LoginRequest",
     "TokenResponse",
     "ProfileResponse",
     "OwnerPublicProfile",
     "ProfileUpdate",
     "VerificationUpdate",
     "SpaceCreate",
     "SpaceUpdate",
     "SpaceResponse",
     "SpaceSearchResponse",
     "BookingCreate",
     "BookingResponse",
     "BookingListResponse",
     "PlatformStats",
     "AdminOverviewResponse",
     "DashboardResponse",
]

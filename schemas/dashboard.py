# schemas/dashboard.py
from typing import List
from pydantic import BaseModel

from .profile import ProfileResponse
from .space import SpaceResponse
from .booking import BookingResponse


class PlatformStats(BaseModel):
     total_users: int
     building_owners: int
     vehicle_owners: int
     brand_companies: int
     total_spaces: int
     active_spaces: int
     total_bookings: int
     total_revenue: float


class AdminOverviewResponse(BaseModel):
     stats: PlatformStats
     profiles: List[ProfileResponse]
     spaces: List[SpaceResponse]
     bookings: List[BookingResponse]


class DashboardResponse(BaseModel):
     profile: ProfileResponse
     role_label: str
     quick_actions: List[str]
     listings_count: int = 0
     bookings_count: int = 0

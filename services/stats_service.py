# services/stats_service.py
"""
Platform statistics for the admin dashboard.

A pure reducer over already-fetched rows: the same input always yields the
same numbers, and nothing is cached between calls.
"""
from decimal import Decimal
from typing import Iterable

from models import AdvertisingSpace, Booking, Profile, UserRole
from models.advertising_space import AvailabilityStatus
from schemas.dashboard import PlatformStats


def compute_platform_stats(
     profiles: Iterable[Profile],
     spaces: Iterable[AdvertisingSpace],
     bookings: Iterable[Booking],
) -> PlatformStats:
     profiles = list(profiles)
     spaces = list(spaces)
     bookings = list(bookings)

     def count_role(role: UserRole) -> int:
          return sum(1 for p in profiles if p.role == role)

     total_revenue = sum((Decimal(b.total_amount or 0) for b in bookings), Decimal("0"))

     return PlatformStats(
          total_users=len(profiles),
          building_owners=count_role(UserRole.BUILDING_OWNER),
          vehicle_owners=count_role(UserRole.VEHICLE_OWNER),
          brand_companies=count_role(UserRole.BRAND_COMPANY),
          total_spaces=len(spaces),
          active_spaces=sum(1 for s in spaces if s.availability_status == AvailabilityStatus.AVAILABLE.value),
          total_bookings=len(bookings),
          total_revenue=float(total_revenue),
     )


ROLE_LABELS = {
     UserRole.BUILDING_OWNER: "Building Owner",
     UserRole.VEHICLE_OWNER: "Vehicle Owner",
     UserRole.BRAND_COMPANY: "Brand/Company",
     UserRole.ADMIN: "Administrator",
}


def role_label(role: UserRole) -> str:
     return ROLE_LABELS.get(role, "User")


def quick_actions(role: UserRole) -> list:
     """Dashboard shortcuts offered to each role."""
     if role == UserRole.BRAND_COMPANY:
          return ["browse_spaces", "my_bookings"]
     if role in (UserRole.BUILDING_OWNER, UserRole.VEHICLE_OWNER):
          return ["add_space", "my_listings", "incoming_bookings"]
     if role == UserRole.ADMIN:
          return ["admin_overview"]
     return []

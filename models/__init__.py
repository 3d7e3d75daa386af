# models/__init__.py
from .base import Base
from .user import User
from .profile import Profile, UserRole, VerificationStatus, OWNER_ROLES
from .advertising_space import AdvertisingSpace, SpaceType, AvailabilityStatus
from .booking import Booking, BookingStatus, PaymentStatus

__all__ = [
     "Base",
     "User",
     "Profile",
     "UserRole",
     "VerificationStatus",
     "OWNER_ROLES",
     "AdvertisingSpace",
     "SpaceType",
     "AvailabilityStatus",
     "Booking",
     "BookingStatus",
     "PaymentStatus",
]

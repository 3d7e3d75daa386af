# models/advertising_space.py
import enum
from sqlalchemy import (
     Column, Integer, String, Numeric, Text, DateTime, JSON, ForeignKey, CheckConstraint, func
)
from sqlalchemy.orm import relationship
from .base import Base


class SpaceType(str, enum.Enum):
     BUILDING = "building"
     VEHICLE = "vehicle"


class AvailabilityStatus(str, enum.Enum):
     AVAILABLE = "available"
     BOOKED = "booked"
     UNAVAILABLE = "unavailable"


class AdvertisingSpace(Base):
     """
     AdvertisingSpace model - a rentable building wall or vehicle surface.

     Created and edited by its owner; readable by any visitor while
     availability_status is 'available'.
     """
     __tablename__ = "advertising_spaces"
     __table_args__ = (
          CheckConstraint("price_per_month IS NULL OR price_per_month >= 0", name="ck_spaces_price_non_negative"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     owner_id = Column(
          Integer,
          ForeignKey("profiles.user_id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Listing details
     title = Column(String(255), nullable=False)
     description = Column(Text, nullable=True)
     location = Column(String(255), nullable=False, index=True)
     space_type = Column(String(20), nullable=False, index=True)  # building, vehicle
     price_per_month = Column(Numeric(12, 2), nullable=True)
     dimensions = Column(String(100), nullable=True)
     images = Column(JSON, nullable=True)  # list of image URLs
     amenities = Column(JSON, nullable=True)  # list of strings
     availability_status = Column(
          String(50),
          default=AvailabilityStatus.AVAILABLE.value,
          nullable=False,
          index=True
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     owner = relationship("Profile", back_populates="spaces")
     bookings = relationship("Booking", back_populates="space", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<AdvertisingSpace(id={self.id}, title='{self.title}', status='{self.availability_status}')>"

     @property
     def is_available(self) -> bool:
          return self.availability_status == AvailabilityStatus.AVAILABLE.value

# models/profile.py
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class UserRole(str, enum.Enum):
     """Enumeration for marketplace roles."""
     BUILDING_OWNER = "building_owner"
     VEHICLE_OWNER = "vehicle_owner"
     BRAND_COMPANY = "brand_company"
     ADMIN = "admin"


OWNER_ROLES = (UserRole.BUILDING_OWNER, UserRole.VEHICLE_OWNER)


class VerificationStatus(str, enum.Enum):
     PENDING = "pending"
     VERIFIED = "verified"
     REJECTED = "rejected"


class Profile(Base):
     """
     Profile model - public identity record for a user.

     Created at sign-up, edited by the owning user (contact fields) or an
     admin (verification status). Never deleted by the application.
     """
     __tablename__ = "profiles"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(
          Integer,
          ForeignKey("users.id", ondelete="CASCADE"),
          nullable=False,
          unique=True,
          index=True
     )

     # Personal info
     first_name = Column(String(100), nullable=False)
     last_name = Column(String(100), nullable=False)
     role = Column(
          Enum(
               UserRole,
               name="user_role",
               create_constraint=True,
               values_callable=lambda roles: [r.value for r in roles],
          ),
          default=UserRole.BUILDING_OWNER,
          nullable=False,
          index=True
     )
     company_name = Column(String(255), nullable=True)
     phone = Column(String(50), nullable=True)
     avatar_url = Column(String(500), nullable=True)
     bio = Column(Text, nullable=True)
     website = Column(String(255), nullable=True)

     # Status
     verification_status = Column(String(50), default=VerificationStatus.PENDING.value, nullable=False)  # pending, verified, rejected

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     user = relationship("User", back_populates="profile")
     spaces = relationship("AdvertisingSpace", back_populates="owner")
     bookings = relationship("Booking", back_populates="advertiser")

     def __repr__(self):
          return f"<Profile(user_id={self.user_id}, name='{self.first_name} {self.last_name}', role='{self.role.value}')>"

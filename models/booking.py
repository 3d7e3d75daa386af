# models/booking.py
import enum
from sqlalchemy import (
     Column, Integer, Numeric, Date, DateTime, JSON, ForeignKey, Enum, CheckConstraint, func
)
from sqlalchemy.orm import relationship
from .base import Base


class BookingStatus(str, enum.Enum):
     """Enumeration for booking lifecycle status."""
     PENDING = "pending"
     CONFIRMED = "confirmed"
     CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
     """Enumeration for booking payment status."""
     UNPAID = "unpaid"
     PAID = "paid"


class Booking(Base):
     """
     Booking model - a brand's reservation of a space for a date range.

     Status only moves forward: pending -> confirmed | cancelled,
     unpaid -> paid. Everything else is immutable history.
     """
     __tablename__ = "bookings"
     __table_args__ = (
          CheckConstraint("total_amount >= 0", name="ck_bookings_amount_non_negative"),
          CheckConstraint("end_date >= start_date", name="ck_bookings_date_range"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Foreign keys
     space_id = Column(
          Integer,
          ForeignKey("advertising_spaces.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     advertiser_id = Column(
          Integer,
          ForeignKey("profiles.user_id", ondelete="NO ACTION"),
          nullable=False,
          index=True
     )

     # Booking details
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)
     total_amount = Column(Numeric(12, 2), nullable=False)
     campaign_details = Column(JSON, nullable=True)
     booking_status = Column(
          Enum(
               BookingStatus,
               name="booking_status",
               create_constraint=True,
               values_callable=lambda statuses: [s.value for s in statuses],
          ),
          default=BookingStatus.PENDING,
          nullable=False,
          index=True
     )
     payment_status = Column(
          Enum(
               PaymentStatus,
               name="payment_status",
               create_constraint=True,
               values_callable=lambda statuses: [s.value for s in statuses],
          ),
          default=PaymentStatus.UNPAID,
          nullable=False
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     space = relationship("AdvertisingSpace", back_populates="bookings")
     advertiser = relationship("Profile", back_populates="bookings")

     def __repr__(self):
          return f"<Booking(id={self.id}, space_id={self.space_id}, status='{self.booking_status.value}')>"

     def confirm(self) -> None:
          """Mark the booking as confirmed."""
          self.booking_status = BookingStatus.CONFIRMED

     def cancel(self) -> None:
          """Mark the booking as cancelled."""
          self.booking_status = BookingStatus.CANCELLED

     def mark_as_paid(self) -> None:
          """Mark the booking as paid."""
          self.payment_status = PaymentStatus.PAID

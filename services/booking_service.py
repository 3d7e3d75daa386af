# services/booking_service.py
"""
Booking Service - reservations and their status transitions.

Transitions:
     booking_status: pending -> confirmed | cancelled
     payment_status: unpaid -> paid (confirmed bookings only)
"""
import logging
import math
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from models import AdvertisingSpace, Booking
from models.booking import BookingStatus, PaymentStatus
from schemas.booking import BookingCreate
from .errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationFailure
from .session_context import SessionContext

logger = logging.getLogger(__name__)

DAYS_PER_BILLING_MONTH = 30


def billable_months(start_date, end_date) -> int:
     """Whole billing months covered by an inclusive date range, minimum 1."""
     days = (end_date - start_date).days + 1
     return max(1, math.ceil(days / DAYS_PER_BILLING_MONTH))


class BookingService:
     """Service class for booking-related business logic."""

     @staticmethod
     def create_booking(db: Session, session: SessionContext, data: BookingCreate) -> Booking:
          """
          Reserve a space for the calling brand.

          Raises:
               PermissionDeniedError: If the caller is not a brand/company
               NotFoundError: If the space doesn't exist
               ConflictError: If the space is not available
               ValidationFailure: If no amount is given and the space has no price
          """
          if not session.is_brand:
               raise PermissionDeniedError("Only brands and companies can book spaces")

          space = db.query(AdvertisingSpace).filter(AdvertisingSpace.id == data.space_id).first()
          if not space:
               raise NotFoundError(f"Space with ID {data.space_id} not found")
          if not space.is_available:
               raise ConflictError("This space is not available for booking")

          total_amount = data.total_amount
          if total_amount is None:
               if space.price_per_month is None:
                    raise ValidationFailure("total_amount is required for spaces without a monthly price")
               months = billable_months(data.start_date, data.end_date)
               total_amount = Decimal(space.price_per_month) * months

          booking = Booking(
               space_id=space.id,
               advertiser_id=session.user_id,
               start_date=data.start_date,
               end_date=data.end_date,
               total_amount=total_amount,
               campaign_details=data.campaign_details,
               booking_status=BookingStatus.PENDING,
               payment_status=PaymentStatus.UNPAID,
          )
          db.add(booking)
          db.flush()
          logger.info("Booking %s created for space %s by user_id=%s", booking.id, space.id, session.user_id)
          return booking

     @staticmethod
     def list_advertiser_bookings(db: Session, advertiser_id: int) -> List[Booking]:
          return (
               db.query(Booking)
               .filter(Booking.advertiser_id == advertiser_id)
               .order_by(Booking.created_at.desc(), Booking.id.desc())
               .all()
          )

     @staticmethod
     def list_owner_bookings(db: Session, owner_id: int) -> List[Booking]:
          """Bookings made on any of the owner's spaces."""
          return (
               db.query(Booking)
               .join(AdvertisingSpace, Booking.space_id == AdvertisingSpace.id)
               .filter(AdvertisingSpace.owner_id == owner_id)
               .order_by(Booking.created_at.desc(), Booking.id.desc())
               .all()
          )

     @staticmethod
     def _get_booking(db: Session, booking_id: int) -> Booking:
          booking = db.query(Booking).filter(Booking.id == booking_id).first()
          if not booking:
               raise NotFoundError(f"Booking with ID {booking_id} not found")
          return booking

     @staticmethod
     def _is_space_owner(session: SessionContext, booking: Booking) -> bool:
          return booking.space is not None and session.owns(booking.space.owner_id)

     @staticmethod
     def confirm_booking(db: Session, session: SessionContext, booking_id: int) -> Booking:
          booking = BookingService._get_booking(db, booking_id)
          if not (session.is_admin or BookingService._is_space_owner(session, booking)):
               raise PermissionDeniedError("Only the space owner can confirm this booking")
          if booking.booking_status != BookingStatus.PENDING:
               raise ConflictError(f"Cannot confirm a {booking.booking_status.value} booking")
          booking.confirm()
          db.flush()
          return booking

     @staticmethod
     def cancel_booking(db: Session, session: SessionContext, booking_id: int) -> Booking:
          booking = BookingService._get_booking(db, booking_id)
          allowed = (
               session.is_admin
               or session.owns(booking.advertiser_id)
               or BookingService._is_space_owner(session, booking)
          )
          if not allowed:
               raise PermissionDeniedError("You do not have permission to cancel this booking")
          if booking.booking_status != BookingStatus.PENDING:
               raise ConflictError(f"Cannot cancel a {booking.booking_status.value} booking")
          booking.cancel()
          db.flush()
          return booking

     @staticmethod
     def mark_booking_paid(db: Session, session: SessionContext, booking_id: int) -> Booking:
          booking = BookingService._get_booking(db, booking_id)
          if not (session.is_admin or BookingService._is_space_owner(session, booking)):
               raise PermissionDeniedError("Only the space owner or an admin can record payment")
          if booking.booking_status != BookingStatus.CONFIRMED:
               raise ConflictError("Only confirmed bookings can be marked as paid")
          if booking.payment_status == PaymentStatus.PAID:
               raise ConflictError("Booking is already paid")
          booking.mark_as_paid()
          db.flush()
          logger.info("Booking %s marked paid", booking.id)
          return booking

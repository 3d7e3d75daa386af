# routers/bookings.py
"""
Booking API routes.

Role-based access:
- Brand/Company: create bookings, list own bookings, cancel own pending bookings
- Space owner: list incoming bookings, confirm/cancel them, record payment
- Admin: everything
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_session
from models import Booking
from schemas.booking import BookingCreate, BookingResponse, BookingListResponse
from services.booking_service import BookingService
from services.errors import ServiceError
from services.session_context import SessionContext
from . import http_error

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


def _build_booking_response(booking: Booking) -> BookingResponse:
     """
     Helper function to build BookingResponse with the space title.
     """
     return BookingResponse(
          id=booking.id,
          space_id=booking.space_id,
          advertiser_id=booking.advertiser_id,
          start_date=booking.start_date,
          end_date=booking.end_date,
          total_amount=booking.total_amount,
          booking_status=booking.booking_status,
          payment_status=booking.payment_status,
          campaign_details=booking.campaign_details,
          created_at=booking.created_at,
          space_title=booking.space.title if booking.space else None,
     )


def _list_response(bookings: List[Booking]) -> BookingListResponse:
     return BookingListResponse(
          bookings=[_build_booking_response(b) for b in bookings],
          total=len(bookings),
     )


@router.post(
     "",
     response_model=BookingResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Book a space"
)
def create_booking(
     body: BookingCreate,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     """
     Reserve an available space for a date range.

     - **total_amount**: optional; defaults to the monthly price times the
       number of 30-day months covered (at least one)
     """
     try:
          booking = BookingService.create_booking(db, session, body)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(booking)
     return _build_booking_response(booking)


@router.get("/mine", response_model=BookingListResponse, summary="Caller's bookings")
def list_my_bookings(
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     return _list_response(BookingService.list_advertiser_bookings(db, session.user_id))


@router.get("/incoming", response_model=BookingListResponse, summary="Bookings on the caller's spaces")
def list_incoming_bookings(
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     return _list_response(BookingService.list_owner_bookings(db, session.user_id))


@router.patch("/{booking_id}/confirm", response_model=BookingResponse, summary="Confirm booking")
def confirm_booking(
     booking_id: int,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     try:
          booking = BookingService.confirm_booking(db, session, booking_id)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(booking)
     return _build_booking_response(booking)


@router.patch("/{booking_id}/cancel", response_model=BookingResponse, summary="Cancel booking")
def cancel_booking(
     booking_id: int,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     try:
          booking = BookingService.cancel_booking(db, session, booking_id)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(booking)
     return _build_booking_response(booking)


@router.patch("/{booking_id}/mark-paid", response_model=BookingResponse, summary="Mark booking as paid")
def mark_booking_paid(
     booking_id: int,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     """
     Convenience endpoint to mark a confirmed booking as PAID.
     """
     try:
          booking = BookingService.mark_booking_paid(db, session, booking_id)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(booking)
     return _build_booking_response(booking)

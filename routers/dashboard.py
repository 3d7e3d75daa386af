# routers/dashboard.py
"""
Dashboard API routes: the per-user dashboard and the admin overview.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_session, require_roles
from models import AdvertisingSpace, Booking, Profile, UserRole
from schemas.dashboard import AdminOverviewResponse, DashboardResponse
from schemas.profile import ProfileResponse
from services.booking_service import BookingService
from services.session_context import SessionContext
from services.space_service import SpaceService
from services.stats_service import compute_platform_stats, quick_actions, role_label
from .bookings import _build_booking_response
from .spaces import _build_space_response

router = APIRouter(tags=["dashboard"])


@router.get("/api/dashboard", response_model=DashboardResponse, summary="Current user's dashboard")
def get_dashboard(
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     """
     Profile summary plus role-specific shortcuts.

     - Owners: number of listings and of bookings received
     - Brands: number of bookings made
     """
     listings_count = 0
     bookings_count = 0
     if session.is_owner:
          listings_count = len(SpaceService.list_owner_spaces(db, session.user_id))
          bookings_count = len(BookingService.list_owner_bookings(db, session.user_id))
     elif session.is_brand:
          bookings_count = len(BookingService.list_advertiser_bookings(db, session.user_id))

     return DashboardResponse(
          profile=ProfileResponse.model_validate(session.profile),
          role_label=role_label(session.role),
          quick_actions=quick_actions(session.role),
          listings_count=listings_count,
          bookings_count=bookings_count,
     )


@router.get("/api/admin/overview", response_model=AdminOverviewResponse, summary="Admin platform overview")
def get_admin_overview(
     db: Session = Depends(get_session),
     session: SessionContext = Depends(require_roles(UserRole.ADMIN))
):
     """
     All profiles, spaces and bookings (newest first) with aggregate statistics.
     """
     profiles = db.query(Profile).order_by(Profile.created_at.desc(), Profile.id.desc()).all()
     spaces = db.query(AdvertisingSpace).order_by(AdvertisingSpace.created_at.desc(), AdvertisingSpace.id.desc()).all()
     bookings = db.query(Booking).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

     return AdminOverviewResponse(
          stats=compute_platform_stats(profiles, spaces, bookings),
          profiles=[ProfileResponse.model_validate(p) for p in profiles],
          spaces=[_build_space_response(s) for s in spaces],
          bookings=[_build_booking_response(b) for b in bookings],
     )

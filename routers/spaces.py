# routers/spaces.py
"""
Advertising space API routes for Adora backend.

Search is public. Listing, editing and image management require an owner
(building_owner / vehicle_owner) or admin session.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from azure_blob import SPACES_CONTAINER, delete_from_blob, upload_to_blob
from database import get_session
from dependencies import get_current_session, get_optional_session
from models import AdvertisingSpace
from schemas.profile import OwnerPublicProfile
from schemas.space import SpaceCreate, SpaceUpdate, SpaceResponse, SpaceSearchResponse
from services.errors import ServiceError
from services.search_service import INDIAN_STATES, PRICE_RANGES, SpaceSearchFilters, search_spaces
from services.session_context import SessionContext
from services.space_service import SpaceService
from . import http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/spaces", tags=["spaces"])


def _build_space_response(
     space: AdvertisingSpace,
     include_owner: bool = False,
     viewer: Optional[SessionContext] = None
) -> SpaceResponse:
     """
     Helper function to build SpaceResponse, optionally with the owner's public fields.

     The owner's phone number is only shown to brands.
     """
     owner = None
     if include_owner and space.owner is not None:
          owner = OwnerPublicProfile.model_validate(space.owner)
          if viewer is None or not viewer.is_brand:
               owner.phone = None

     return SpaceResponse(
          id=space.id,
          owner_id=space.owner_id,
          title=space.title,
          description=space.description,
          location=space.location,
          space_type=space.space_type,
          price_per_month=space.price_per_month,
          dimensions=space.dimensions,
          images=space.images or [],
          amenities=space.amenities or [],
          availability_status=space.availability_status,
          created_at=space.created_at,
          owner=owner,
     )


def _run_search(
     db: Session,
     filters: SpaceSearchFilters,
     enhanced: bool,
     request_seq: Optional[int],
     viewer: Optional[SessionContext]
) -> SpaceSearchResponse:
     spaces = search_spaces(db, filters, enhanced=enhanced)
     results = [_build_space_response(s, include_owner=enhanced, viewer=viewer) for s in spaces]
     return SpaceSearchResponse(
          spaces=results,
          total=len(results),
          no_results=not results,
          request_seq=request_seq,
     )


@router.get("/search", response_model=SpaceSearchResponse, summary="Search available spaces")
def search_basic(
     search: str = Query("", description="Location substring"),
     location: str = Query("", description="Alias of search"),
     state: str = Query("", description="State name, matched within the location"),
     space_type: str = Query("", description="building or vehicle"),
     price_range: str = Query("", description='"min-max" or "min"'),
     request_seq: Optional[int] = Query(None, description="Echoed back so clients can drop stale responses"),
     db: Session = Depends(get_session),
     viewer: Optional[SessionContext] = Depends(get_optional_session)
):
     """
     Basic search: the free-text term is matched against the location only.
     """
     filters = SpaceSearchFilters(
          search=search or location,
          state=state,
          space_type=space_type,
          price_range=price_range,
     )
     return _run_search(db, filters, False, request_seq, viewer)


@router.get("/search/enhanced", response_model=SpaceSearchResponse, summary="Search spaces with owner details")
def search_enhanced(
     search: str = Query("", description="Location or title substring"),
     location: str = Query("", description="Alias of search"),
     state: str = Query("", description="State name, matched within the location"),
     space_type: str = Query("", description="building or vehicle"),
     price_range: str = Query("", description='"min-max" or "min"'),
     request_seq: Optional[int] = Query(None, description="Echoed back so clients can drop stale responses"),
     db: Session = Depends(get_session),
     viewer: Optional[SessionContext] = Depends(get_optional_session)
):
     """
     Enhanced search: free text matches location OR title, the state filter
     is ANDed on top, and each result carries the owner's public profile.
     """
     filters = SpaceSearchFilters(
          search=search or location,
          state=state,
          space_type=space_type,
          price_range=price_range,
     )
     return _run_search(db, filters, True, request_seq, viewer)


@router.get("/states", response_model=List[str], summary="States offered by the state filter")
def list_states():
     return INDIAN_STATES


@router.get("/price-ranges", response_model=List[str], summary="Price range tokens offered by the price filter")
def list_price_ranges():
     return PRICE_RANGES


@router.post(
     "",
     response_model=SpaceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="List a new space"
)
def create_space(
     body: SpaceCreate,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     try:
          space = SpaceService.create_space(db, session, body)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(space)
     return _build_space_response(space)


@router.get("/mine", response_model=List[SpaceResponse], summary="Caller's listings")
def list_my_spaces(
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     return [_build_space_response(s) for s in SpaceService.list_owner_spaces(db, session.user_id)]


@router.get("/{space_id}", response_model=SpaceResponse, summary="Get space by ID")
def get_space(
     space_id: int,
     db: Session = Depends(get_session),
     viewer: Optional[SessionContext] = Depends(get_optional_session)
):
     try:
          space = SpaceService.get_space(db, space_id, viewer)
     except ServiceError as exc:
          raise http_error(exc)
     return _build_space_response(space, include_owner=True, viewer=viewer)


@router.put("/{space_id}", response_model=SpaceResponse, summary="Update space")
def update_space(
     space_id: int,
     body: SpaceUpdate,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     """
     Update a listing. Only provided fields will be updated.
     """
     try:
          space = SpaceService.update_space(db, session, space_id, body)
     except ServiceError as exc:
          raise http_error(exc)
     db.commit()
     db.refresh(space)
     return _build_space_response(space)


@router.post("/{space_id}/images", response_model=SpaceResponse, summary="Upload a space image")
def upload_space_image(
     space_id: int,
     image: UploadFile = File(...),
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     if not (image.content_type or "").startswith("image/"):
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only image uploads are allowed")

     try:
          SpaceService.ensure_editable(db, session, space_id)
     except ServiceError as exc:
          raise http_error(exc)

     try:
          url = upload_to_blob(image, SPACES_CONTAINER, session.user_id)
     except Exception:
          logger.exception("Image upload failed for space %s", space_id)
          raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Image upload failed")

     space = SpaceService.add_image(db, session, space_id, url)
     db.commit()
     db.refresh(space)
     return _build_space_response(space)


@router.delete("/{space_id}/images", response_model=SpaceResponse, summary="Remove a space image")
def remove_space_image(
     space_id: int,
     url: str = Query(..., description="Image URL to remove"),
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     try:
          space = SpaceService.ensure_editable(db, session, space_id)
     except ServiceError as exc:
          raise http_error(exc)

     images = list(space.images or [])
     if url not in images:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found on this space")

     try:
          delete_from_blob(url)
     except Exception:
          # Blob may already be gone
          logger.warning("Could not delete blob %s", url, exc_info=True)

     images.remove(url)
     space.images = images
     db.commit()
     db.refresh(space)
     return _build_space_response(space)

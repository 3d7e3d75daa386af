# services/space_service.py
"""
Space Service - listing creation and owner edits.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from models import AdvertisingSpace
from schemas.space import SpaceCreate, SpaceUpdate
from .errors import NotFoundError, PermissionDeniedError
from .session_context import SessionContext

logger = logging.getLogger(__name__)


class SpaceService:
     """Service class for advertising space business logic."""

     @staticmethod
     def create_space(db: Session, session: SessionContext, data: SpaceCreate) -> AdvertisingSpace:
          """
          List a new space owned by the caller.

          Raises:
               PermissionDeniedError: If the caller is not an owner or admin
          """
          if not (session.is_owner or session.is_admin):
               raise PermissionDeniedError("Only building or vehicle owners can list spaces")

          space = AdvertisingSpace(
               owner_id=session.user_id,
               title=data.title,
               description=data.description,
               location=data.location,
               space_type=data.space_type.value,
               price_per_month=data.price_per_month,
               dimensions=data.dimensions,
               images=list(data.images),
               amenities=list(data.amenities),
               availability_status=data.availability_status.value,
          )
          db.add(space)
          db.flush()
          logger.info("Space %s listed by user_id=%s", space.id, session.user_id)
          return space

     @staticmethod
     def get_space(db: Session, space_id: int, session: SessionContext = None) -> AdvertisingSpace:
          """
          Fetch a space. Unavailable spaces are only visible to their owner and admins.

          Raises:
               NotFoundError: If the space does not exist or is hidden from the caller
          """
          space = db.query(AdvertisingSpace).filter(AdvertisingSpace.id == space_id).first()
          if not space:
               raise NotFoundError(f"Space with ID {space_id} not found")
          if not space.is_available:
               if session is None or not (session.is_admin or session.owns(space.owner_id)):
                    raise NotFoundError(f"Space with ID {space_id} not found")
          return space

     @staticmethod
     def list_owner_spaces(db: Session, owner_id: int) -> List[AdvertisingSpace]:
          return (
               db.query(AdvertisingSpace)
               .filter(AdvertisingSpace.owner_id == owner_id)
               .order_by(AdvertisingSpace.created_at.desc(), AdvertisingSpace.id.desc())
               .all()
          )

     @staticmethod
     def _get_editable(db: Session, session: SessionContext, space_id: int) -> AdvertisingSpace:
          space = db.query(AdvertisingSpace).filter(AdvertisingSpace.id == space_id).first()
          if not space:
               raise NotFoundError(f"Space with ID {space_id} not found")
          if not (session.is_admin or session.owns(space.owner_id)):
               raise PermissionDeniedError("You can only edit your own spaces")
          return space

     @staticmethod
     def update_space(db: Session, session: SessionContext, space_id: int, data: SpaceUpdate) -> AdvertisingSpace:
          """Apply the provided fields to a space the caller owns."""
          space = SpaceService._get_editable(db, session, space_id)

          changes = data.model_dump(exclude_unset=True)
          for field_name, value in changes.items():
               if value is None and field_name in ("title", "location", "space_type", "availability_status"):
                    continue  # required columns
               if field_name in ("space_type", "availability_status"):
                    value = value.value
               setattr(space, field_name, value)

          db.flush()
          return space

     @staticmethod
     def add_image(db: Session, session: SessionContext, space_id: int, image_url: str) -> AdvertisingSpace:
          space = SpaceService._get_editable(db, session, space_id)
          # Reassign so the JSON column is flagged as modified
          space.images = list(space.images or []) + [image_url]
          db.flush()
          return space

     @staticmethod
     def ensure_editable(db: Session, session: SessionContext, space_id: int) -> AdvertisingSpace:
          """Permission check used before uploading files for a space."""
          return SpaceService._get_editable(db, session, space_id)

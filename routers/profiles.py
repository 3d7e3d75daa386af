# routers/profiles.py
"""
Profile API routes. Users edit their own contact fields; admins set
verification status.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_session, require_roles
from models import Profile, UserRole
from schemas.profile import ProfileResponse, ProfileUpdate, VerificationUpdate
from services.session_context import SessionContext

router = APIRouter(tags=["profiles"])


@router.get("/api/profiles/me", response_model=ProfileResponse, summary="Get own profile")
def get_my_profile(session: SessionContext = Depends(get_current_session)):
     return ProfileResponse.model_validate(session.profile)


@router.put("/api/profiles/me", response_model=ProfileResponse, summary="Update own profile")
def update_my_profile(
     body: ProfileUpdate,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(get_current_session)
):
     """
     Update contact fields on the caller's profile.

     Role and verification status cannot be changed here.
     """
     profile = db.query(Profile).filter(Profile.user_id == session.user_id).first()
     changes = body.model_dump(exclude_unset=True)
     if not changes:
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")

     for field_name, value in changes.items():
          if value is None and field_name in ("first_name", "last_name"):
               continue
          setattr(profile, field_name, value)

     db.commit()
     db.refresh(profile)
     return ProfileResponse.model_validate(profile)


@router.patch(
     "/api/admin/profiles/{user_id}/verification",
     response_model=ProfileResponse,
     summary="Set profile verification status"
)
def set_verification_status(
     user_id: int,
     body: VerificationUpdate,
     db: Session = Depends(get_session),
     session: SessionContext = Depends(require_roles(UserRole.ADMIN))
):
     profile = db.query(Profile).filter(Profile.user_id == user_id).first()
     if not profile:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Profile for user ID {user_id} not found"
          )

     profile.verification_status = body.verification_status.value
     db.commit()
     db.refresh(profile)
     return ProfileResponse.model_validate(profile)

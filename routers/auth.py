# routers/auth.py
"""
Auth API routes: sign-up, sign-in, sign-out and current user.
"""
import logging

import requests
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_session
from schemas.auth import RegisterRequest, LoginRequest, TokenResponse
from schemas.profile import ProfileResponse
from services.auth_service import AuthService, create_access_token
from services.errors import ServiceError
from services.session_context import SessionContext
from utils import email as mailer
from . import http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
     "/signup",
     response_model=TokenResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a new account"
)
def sign_up(body: RegisterRequest, db: Session = Depends(get_session)):
     """
     Create a user and profile, then return an access token.

     - **role**: building_owner, vehicle_owner or brand_company (hyphenated aliases accepted)
     - **confirmPassword** must equal **password**
     """
     try:
          user, profile = AuthService.sign_up(db, body)
     except ServiceError as exc:
          raise http_error(exc)

     db.commit()

     if mailer.is_configured():
          try:
               mailer.send_welcome_email(user.email, profile.first_name)
          except (requests.RequestException, RuntimeError):
               logger.exception("Welcome email to user_id=%s failed", user.id)

     token = create_access_token(user.id, profile.role)
     return TokenResponse(access_token=token, profile=ProfileResponse.model_validate(profile))


@router.post("/login", response_model=TokenResponse, summary="Sign in")
def sign_in(body: LoginRequest, db: Session = Depends(get_session)):
     result = AuthService.sign_in(db, body.email, body.password)
     if result is None:
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

     user, profile = result
     token = create_access_token(user.id, profile.role)
     return TokenResponse(access_token=token, profile=ProfileResponse.model_validate(profile))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="Sign out")
def sign_out(session: SessionContext = Depends(get_current_session)):
     """Revoke the bearer token used for this request."""
     AuthService.sign_out(session.token_claims)
     return None


@router.get("/me", response_model=ProfileResponse, summary="Current user")
def current_user(session: SessionContext = Depends(get_current_session)):
     return ProfileResponse.model_validate(session.profile)

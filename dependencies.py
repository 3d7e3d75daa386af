# dependencies.py
"""
Shared FastAPI dependencies: bearer-token auth resolved into a SessionContext.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError
from sqlalchemy.orm import Session

from database import get_session
from models import Profile, UserRole
from services.auth_service import decode_access_token
from services.session_context import SessionContext

logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> Optional[str]:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          return None
     return auth.split(" ", 1)[1].strip() or None


def _resolve_session(db: Session, token: str) -> SessionContext:
     try:
          payload = decode_access_token(token)
     except JWTError:
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")

     user_id = int(payload["sub"])
     profile = db.query(Profile).filter(Profile.user_id == user_id).first()
     if profile is None:
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Profile not found")

     # Role comes from the profile so admin changes apply without re-login
     return SessionContext(
          user_id=user_id,
          role=profile.role,
          profile=profile,
          token_claims=payload,
     )


def get_current_session(request: Request, db: Session = Depends(get_session)) -> SessionContext:
     """Require a signed-in caller."""
     token = _bearer_token(request)
     if token is None:
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
     return _resolve_session(db, token)


def get_optional_session(request: Request, db: Session = Depends(get_session)) -> Optional[SessionContext]:
     """For public reads: no token, or an expired, revoked or unknown one, means an anonymous visitor."""
     token = _bearer_token(request)
     if token is None:
          return None
     try:
          return _resolve_session(db, token)
     except HTTPException:
          logger.debug("Ignoring invalid bearer token on a public route")
          return None


def require_roles(*roles: UserRole):
     """Dependency factory restricting a route to the given roles."""

     def checker(session: SessionContext = Depends(get_current_session)) -> SessionContext:
          if session.role not in roles:
               raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="You do not have permission to perform this action"
               )
          return session

     return checker

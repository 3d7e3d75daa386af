# services/auth_service.py
"""
Auth Service - sign-up, sign-in, sign-out and token handling.

Passwords are bcrypt hashes (passlib); access tokens are HS256 JWTs
(python-jose) carrying the user id in `sub`, the role, and a `jti` used
for sign-out.
"""
import logging
import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from models import User, Profile, UserRole
from schemas.auth import RegisterRequest
from .errors import ConflictError, PasswordMismatchError, PermissionDeniedError

load_dotenv()

logger = logging.getLogger(__name__)

SECRET_KEY = os.getenv("JWT_SECRET")
if not SECRET_KEY:
     raise RuntimeError("JWT_SECRET is not set; refusing to sign or verify access tokens")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "1440"))

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Public sign-up links use hyphenated role names
ROLE_ALIASES = {
     "building-owner": UserRole.BUILDING_OWNER,
     "building_owner": UserRole.BUILDING_OWNER,
     "vehicle-owner": UserRole.VEHICLE_OWNER,
     "vehicle_owner": UserRole.VEHICLE_OWNER,
     "brand-company": UserRole.BRAND_COMPANY,
     "brand_company": UserRole.BRAND_COMPANY,
     "brand": UserRole.BRAND_COMPANY,
}

# jti -> exp (unix seconds) of signed-out tokens, pruned once expired
_revoked_token_ids: Dict[str, int] = {}


def _prune_revoked(now: int) -> None:
     expired = [jti for jti, exp in _revoked_token_ids.items() if exp <= now]
     for jti in expired:
          del _revoked_token_ids[jti]


def resolve_role(raw_role: Optional[str]) -> UserRole:
     """Map a sign-up role (or alias) to a UserRole. Unknown values fall back to building_owner."""
     if raw_role and raw_role.strip().lower() == UserRole.ADMIN.value:
          raise PermissionDeniedError("The admin role cannot be self-assigned")
     return ROLE_ALIASES.get((raw_role or "").strip().lower(), UserRole.BUILDING_OWNER)


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     return pwd_context.verify(password, hashed)


def create_access_token(user_id: int, role: UserRole, expires_minutes: Optional[int] = None) -> str:
     expires = datetime.now(timezone.utc) + timedelta(
          minutes=expires_minutes if expires_minutes is not None else ACCESS_TOKEN_EXPIRE_MINUTES
     )
     payload = {
          "sub": str(user_id),
          "role": role.value,
          "jti": uuid.uuid4().hex,
          "exp": expires,
     }
     return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
     """
     Decode and validate a bearer token.

     Raises:
          JWTError: If the token is malformed, expired or has been signed out.
     """
     _prune_revoked(int(datetime.now(timezone.utc).timestamp()))
     payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
     if payload.get("jti") in _revoked_token_ids:
          raise JWTError("Token has been revoked")
     if "sub" not in payload:
          raise JWTError("Token has no subject")
     return payload


class AuthService:
     """Service class for account lifecycle."""

     @staticmethod
     def sign_up(db: Session, data: RegisterRequest) -> Tuple[User, Profile]:
          """
          Create a user and its profile in one transaction.

          Raises:
               PasswordMismatchError: If the confirmation does not match (nothing is written)
               PermissionDeniedError: If the admin role is requested
               ConflictError: If the email is already registered
          """
          if data.password != data.confirm_password:
               raise PasswordMismatchError()

          role = resolve_role(data.role)
          email = data.email.strip().lower()

          existing = db.query(User).filter(User.email == email).first()
          if existing:
               raise ConflictError("An account with this email already exists")

          user = User(email=email, password=hash_password(data.password))
          db.add(user)
          db.flush()  # Flush to get the ID without committing

          profile = Profile(
               user_id=user.id,
               first_name=data.first_name.strip(),
               last_name=data.last_name.strip(),
               role=role,
               phone=data.phone,
               company_name=data.company_name,
          )
          db.add(profile)
          db.flush()

          logger.info("Registered user_id=%s role=%s", user.id, role.value)
          return user, profile

     @staticmethod
     def sign_in(db: Session, email: str, password: str) -> Optional[Tuple[User, Profile]]:
          """Return (user, profile) for valid credentials, None otherwise."""
          user = db.query(User).filter(User.email == email.strip().lower()).first()
          if not user or not verify_password(password, user.password):
               return None
          return user, user.profile

     @staticmethod
     def sign_out(token_claims: dict) -> None:
          """Revoke the token identified by its jti."""
          jti = token_claims.get("jti")
          if jti:
               expires = token_claims.get("exp") or (
                    datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
               ).timestamp()
               _revoked_token_ids[jti] = int(expires)
               logger.info("Signed out user_id=%s", token_claims.get("sub"))

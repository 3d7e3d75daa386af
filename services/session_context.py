# services/session_context.py
"""
Explicit per-request session context.

Routes receive this object through dependency injection instead of reading
shared auth state: who is calling, with which role, and their profile.
"""
from dataclasses import dataclass, field
from typing import Optional

from models.profile import Profile, UserRole, OWNER_ROLES


@dataclass
class SessionContext:
     user_id: int
     role: UserRole
     profile: Optional[Profile] = None
     token_claims: dict = field(default_factory=dict)

     @property
     def is_admin(self) -> bool:
          return self.role == UserRole.ADMIN

     @property
     def is_owner(self) -> bool:
          return self.role in OWNER_ROLES

     @property
     def is_brand(self) -> bool:
          return self.role == UserRole.BRAND_COMPANY

     def owns(self, owner_id: int) -> bool:
          return self.user_id == owner_id

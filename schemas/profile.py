# schemas/profile.py
"""
Pydantic schemas for profile reads and edits.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.profile import UserRole, VerificationStatus


class ProfileResponse(BaseModel):
     """Full profile as seen by its owner or an admin."""
     id: int
     user_id: int
     first_name: str
     last_name: str
     role: UserRole
     company_name: Optional[str] = None
     phone: Optional[str] = None
     avatar_url: Optional[str] = None
     bio: Optional[str] = None
     website: Optional[str] = None
     verification_status: str
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class OwnerPublicProfile(BaseModel):
     """Owner fields joined onto search results."""
     first_name: str
     last_name: str
     phone: Optional[str] = None
     company_name: Optional[str] = None
     avatar_url: Optional[str] = None
     verification_status: str

     model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
     """Fields a user may change on their own profile."""
     first_name: Optional[str] = Field(None, min_length=1, max_length=100)
     last_name: Optional[str] = Field(None, min_length=1, max_length=100)
     phone: Optional[str] = Field(None, max_length=50)
     company_name: Optional[str] = Field(None, max_length=255)
     avatar_url: Optional[str] = Field(None, max_length=500)
     bio: Optional[str] = None
     website: Optional[str] = Field(None, max_length=255)

     model_config = ConfigDict(extra="forbid")


class VerificationUpdate(BaseModel):
     verification_status: VerificationStatus

     model_config = ConfigDict(
          json_schema_extra={"example": {"verification_status": "verified"}}
     )

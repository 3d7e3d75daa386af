# schemas/auth.py
"""
Pydantic schemas for sign-up, sign-in and token responses.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .profile import ProfileResponse


class RegisterRequest(BaseModel):
     """Sign-up form. Role accepts the public aliases (building-owner, brand, ...)."""
     email: str = Field(..., min_length=3, max_length=255)
     password: str = Field(..., min_length=6, max_length=128)
     confirm_password: str = Field(..., alias="confirmPassword")
     first_name: str = Field(..., min_length=1, max_length=100, alias="firstName")
     last_name: str = Field(..., min_length=1, max_length=100, alias="lastName")
     phone: Optional[str] = Field(None, max_length=50)
     company_name: Optional[str] = Field(None, max_length=255, alias="companyName")
     role: str = Field(default="building_owner", description="building_owner, vehicle_owner or brand_company")

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "email": "owner@example.com",
                    "password": "abc123",
                    "confirmPassword": "abc123",
                    "firstName": "Asha",
                    "lastName": "Rao",
                    "phone": "+919800000000",
                    "role": "building-owner"
               }
          }
     )


class LoginRequest(BaseModel):
     email: str
     password: str


class TokenResponse(BaseModel):
     """Returned by sign-up and sign-in."""
     access_token: str
     token_type: str = "bearer"
     profile: ProfileResponse

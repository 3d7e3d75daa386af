# schemas/space.py
"""
Pydantic schemas for advertising space API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from models.advertising_space import SpaceType, AvailabilityStatus
from .profile import OwnerPublicProfile


class SpaceCreate(BaseModel):
     """Schema for listing a new space."""
     title: str = Field(..., min_length=1, max_length=255)
     description: Optional[str] = None
     location: str = Field(..., min_length=1, max_length=255, description="City, State")
     space_type: SpaceType
     price_per_month: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     dimensions: Optional[str] = Field(None, max_length=100)
     images: List[str] = Field(default_factory=list)
     amenities: List[str] = Field(default_factory=list)
     availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "title": "MG Road Rooftop Hoarding",
                    "location": "Bengaluru, Karnataka",
                    "space_type": "building",
                    "price_per_month": 20000,
                    "dimensions": "40ft x 20ft",
                    "amenities": ["Lighting", "High traffic"]
               }
          }
     )


class SpaceUpdate(BaseModel):
     """Schema for updating a listing. Only provided fields change."""
     title: Optional[str] = Field(None, min_length=1, max_length=255)
     description: Optional[str] = None
     location: Optional[str] = Field(None, min_length=1, max_length=255)
     space_type: Optional[SpaceType] = None
     price_per_month: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     dimensions: Optional[str] = Field(None, max_length=100)
     images: Optional[List[str]] = None
     amenities: Optional[List[str]] = None
     availability_status: Optional[AvailabilityStatus] = None


class SpaceResponse(BaseModel):
     id: int
     owner_id: int
     title: str
     description: Optional[str] = None
     location: str
     space_type: str
     price_per_month: Optional[Decimal] = None
     dimensions: Optional[str] = None
     images: List[str] = Field(default_factory=list)
     amenities: List[str] = Field(default_factory=list)
     availability_status: str
     created_at: datetime

     # Present on the enhanced search path only
     owner: Optional[OwnerPublicProfile] = None

     model_config = ConfigDict(from_attributes=True)


class SpaceSearchResponse(BaseModel):
     """Search results. no_results is set instead of relying on an empty list."""
     spaces: List[SpaceResponse]
     total: int
     no_results: bool
     request_seq: Optional[int] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "spaces": [],
                    "total": 0,
                    "no_results": True,
                    "request_seq": 3
               }
          }
     )

# schemas/booking.py
"""
Pydantic schemas for booking API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional, List
from pydantic import BaseModel, Field, ConfigDict, model_validator

from models.booking import BookingStatus, PaymentStatus


class BookingCreate(BaseModel):
     """Schema for reserving a space."""
     space_id: int = Field(..., gt=0, description="Space ID (must exist and be available)")
     start_date: date
     end_date: date
     total_amount: Optional[Decimal] = Field(
          None, ge=0, max_digits=12, decimal_places=2,
          description="Defaults to price_per_month x months when omitted"
     )
     campaign_details: Optional[Dict[str, Any]] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "space_id": 1,
                    "start_date": "2026-11-01",
                    "end_date": "2026-12-31",
                    "campaign_details": {"brand": "Acme Tea", "creative": "Diwali launch"}
               }
          }
     )

     @model_validator(mode="after")
     def check_date_range(self):
          if self.end_date < self.start_date:
               raise ValueError("end_date must be on or after start_date")
          return self


class BookingResponse(BaseModel):
     id: int
     space_id: int
     advertiser_id: int
     start_date: date
     end_date: date
     total_amount: Decimal
     booking_status: BookingStatus
     payment_status: PaymentStatus
     campaign_details: Optional[Dict[str, Any]] = None
     created_at: datetime

     # Optional related data
     space_title: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class BookingListResponse(BaseModel):
     bookings: List[BookingResponse]
     total: int

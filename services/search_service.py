# services/search_service.py
"""
Space Search Service - turns user-chosen filters into one listing query.

Two variants share the same composition rules:
- basic: free text matches the location only
- enhanced: free text matches location OR title, and the owner's public
  profile is loaded alongside each space

Every other filter is ANDed: availability is always 'available', the state
name is a case-insensitive substring of the location, the space type is an
equality match, and the price range bounds are inclusive.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, joinedload

from models import AdvertisingSpace
from models.advertising_space import AvailabilityStatus

INDIAN_STATES = [
     "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh",
     "Goa", "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand", "Karnataka",
     "Kerala", "Madhya Pradesh", "Maharashtra", "Manipur", "Meghalaya", "Mizoram",
     "Nagaland", "Odisha", "Punjab", "Rajasthan", "Sikkim", "Tamil Nadu",
     "Telangana", "Tripura", "Uttar Pradesh", "Uttarakhand", "West Bengal",
     "Delhi", "Jammu and Kashmir", "Ladakh", "Puducherry", "Chandigarh",
     "Dadra and Nagar Haveli and Daman and Diu", "Lakshadweep", "Andaman and Nicobar Islands",
]

# Values offered by the price filter
PRICE_RANGES = ["0-10000", "10000-25000", "25000-50000", "50000"]


@dataclass(frozen=True)
class SpaceSearchFilters:
     search: str = ""
     state: str = ""
     space_type: str = ""
     price_range: str = ""


def _to_decimal(value: str) -> Optional[Decimal]:
     value = value.strip()
     if not value:
          return None
     try:
          number = Decimal(value)
     except InvalidOperation:
          return None
     if not number.is_finite():
          return None
     return number


def parse_price_range(token: Optional[str]) -> Tuple[Optional[Decimal], Optional[Decimal]]:
     """
     Parse a "min-max" or "min" price token into (lower, upper).

     The upper bound is only returned when a second component exists, is
     numeric and is non-zero; anything else leaves the range open-ended.

     >>> parse_price_range("10000-25000")
     (Decimal('10000'), Decimal('25000'))
     >>> parse_price_range("50000")
     (Decimal('50000'), None)
     >>> parse_price_range("100-abc")
     (Decimal('100'), None)
     """
     if not token or not token.strip():
          return None, None

     parts = token.split("-")
     lower = _to_decimal(parts[0])
     upper = _to_decimal(parts[1]) if len(parts) > 1 else None
     if not upper:
          upper = None
     return lower, upper


def _contains(column, term: str):
     """Case-insensitive substring predicate (ILIKE %term%) with LIKE wildcards escaped."""
     escaped = term.replace("/", "//").replace("%", "/%").replace("_", "/_")
     return column.ilike(f"%{escaped}%", escape="/")


def build_space_query(db: Session, filters: SpaceSearchFilters, enhanced: bool = False) -> Query:
     """
     Compose the listing query for the given filters.

     Args:
          db: SQLAlchemy database session
          filters: User-chosen filter values; blank values add no predicate
          enhanced: Match free text against the title too and load owner profiles

     Returns:
          Query ordered by creation time, newest first
     """
     query = db.query(AdvertisingSpace).filter(
          AdvertisingSpace.availability_status == AvailabilityStatus.AVAILABLE.value
     )

     search = (filters.search or "").strip()
     if search:
          if enhanced:
               query = query.filter(
                    or_(
                         _contains(AdvertisingSpace.location, search),
                         _contains(AdvertisingSpace.title, search),
                    )
               )
          else:
               query = query.filter(_contains(AdvertisingSpace.location, search))

     state = (filters.state or "").strip()
     if state:
          query = query.filter(_contains(AdvertisingSpace.location, state))

     space_type = (filters.space_type or "").strip()
     if space_type:
          query = query.filter(AdvertisingSpace.space_type == space_type)

     lower, upper = parse_price_range(filters.price_range)
     if lower is not None:
          query = query.filter(AdvertisingSpace.price_per_month >= lower)
     if upper is not None:
          query = query.filter(AdvertisingSpace.price_per_month <= upper)

     if enhanced:
          query = query.options(joinedload(AdvertisingSpace.owner))

     return query.order_by(AdvertisingSpace.created_at.desc(), AdvertisingSpace.id.desc())


def search_spaces(db: Session, filters: SpaceSearchFilters, enhanced: bool = False) -> List[AdvertisingSpace]:
     """Run the composed query and return the matching spaces."""
     return build_space_query(db, filters, enhanced=enhanced).all()

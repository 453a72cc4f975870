from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from talenthub.core.statuses import OfferStatus
from talenthub.schemas.base import CamelModel


class OfferCreate(CamelModel):
    application_id: int
    salary: str
    start_date: datetime
    expiry_date: datetime
    benefits: list[Any] = Field(default_factory=list)
    status: OfferStatus = "draft"
    notes: Optional[str] = None


class OfferUpdate(CamelModel):
    application_id: Optional[int] = None
    salary: Optional[str] = None
    start_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    benefits: Optional[list[Any]] = None
    status: Optional[OfferStatus] = None
    notes: Optional[str] = None


class Offer(OfferCreate):
    id: int
    created_at: datetime
    # Set when the offer moves into "accepted" from another status.
    accepted_at: Optional[datetime] = None

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from talenthub.core.statuses import InterviewStatus, InterviewType
from talenthub.schemas.base import CamelModel


class InterviewCreate(CamelModel):
    application_id: int
    title: str = Field(min_length=1)
    type: InterviewType
    scheduled_at: datetime
    duration: int = Field(gt=0)  # minutes
    location: Optional[str] = None
    interviewers: list[str] = Field(default_factory=list)
    status: InterviewStatus = "scheduled"
    feedback: list[Any] = Field(default_factory=list)
    notes: Optional[str] = None


class InterviewUpdate(CamelModel):
    application_id: Optional[int] = None
    title: Optional[str] = Field(default=None, min_length=1)
    type: Optional[InterviewType] = None
    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, gt=0)
    location: Optional[str] = None
    interviewers: Optional[list[str]] = None
    status: Optional[InterviewStatus] = None
    feedback: Optional[list[Any]] = None
    notes: Optional[str] = None


class Interview(InterviewCreate):
    id: int

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from talenthub.core.statuses import ApplicationStatus
from talenthub.schemas.base import CamelModel


class ApplicationCreate(CamelModel):
    candidate_id: int
    job_id: int
    stage_id: int
    status: ApplicationStatus = "new"
    notes: Optional[str] = None
    feedback: list[Any] = Field(default_factory=list)


class ApplicationUpdate(CamelModel):
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    stage_id: Optional[int] = None
    status: Optional[ApplicationStatus] = None
    notes: Optional[str] = None
    feedback: Optional[list[Any]] = None


class Application(ApplicationCreate):
    id: int
    applied_at: datetime
    updated_at: datetime

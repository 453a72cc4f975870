from datetime import datetime
from typing import Optional

from pydantic import Field

from talenthub.core.pipeline import DEFAULT_STAGE_COLOR
from talenthub.core.statuses import JobStatus, JobType
from talenthub.schemas.base import CamelModel


class JobCreate(CamelModel):
    title: str = Field(min_length=1)
    department: str
    location: str
    description: str
    requirements: str
    type: JobType
    status: JobStatus = "draft"
    salary: Optional[str] = None
    created_by: int
    # Publishing channels, e.g. {"linkedin": True, "careers_page": False}.
    channels: dict[str, bool] = Field(default_factory=dict)


class JobUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    type: Optional[JobType] = None
    status: Optional[JobStatus] = None
    salary: Optional[str] = None
    created_by: Optional[int] = None
    channels: Optional[dict[str, bool]] = None


class Job(JobCreate):
    id: int
    created_at: datetime


class JobStageCreate(CamelModel):
    name: str = Field(min_length=1)
    order: int
    job_id: int
    color: str = DEFAULT_STAGE_COLOR


class JobStageUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    order: Optional[int] = None
    job_id: Optional[int] = None
    color: Optional[str] = None


class JobStage(JobStageCreate):
    id: int

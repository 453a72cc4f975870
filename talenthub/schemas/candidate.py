from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from talenthub.core.statuses import CandidateStatus
from talenthub.schemas.base import CamelModel


def _unique_tags(value: list[str] | None) -> list[str] | None:
    if value is None:
        return None
    seen: list[str] = []
    for tag in value:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class CandidateCreate(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str
    phone: Optional[str] = None
    resume_url: Optional[str] = None
    linkedin: Optional[str] = None
    current_job_title: Optional[str] = None
    current_company: Optional[str] = None
    notes: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    source: Optional[str] = None
    status: CandidateStatus = "active"

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str]) -> list[str]:
        return _unique_tags(value)


class CandidateUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    resume_url: Optional[str] = None
    linkedin: Optional[str] = None
    current_job_title: Optional[str] = None
    current_company: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[list[str]] = None
    source: Optional[str] = None
    status: Optional[CandidateStatus] = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str] | None) -> list[str] | None:
        return _unique_tags(value)


class Candidate(CandidateCreate):
    id: int
    created_at: datetime

import datetime as dt

from pydantic import Field

from talenthub.schemas.base import CamelModel


class TimelinePoint(CamelModel):
    date: dt.date
    count: int


class DashboardStats(CamelModel):
    active_jobs: int = 0
    total_candidates: int = 0
    interviews_this_week: int = 0
    avg_time_to_hire: int = 0  # days
    candidates_by_stage: dict[str, int] = Field(default_factory=dict)
    applications_timeline: list[TimelinePoint] = Field(default_factory=list)
    updated_at: dt.datetime

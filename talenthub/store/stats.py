from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Callable, Iterable

from talenthub.core.datetime_utils import round_half_up, to_utc, utc_now, whole_days_between
from talenthub.core.statuses import INTERVIEW_SCHEDULED, JOB_ACTIVE, OFFER_ACCEPTED
from talenthub.schemas.application import Application
from talenthub.schemas.dashboard import DashboardStats, TimelinePoint
from talenthub.schemas.interview import Interview
from talenthub.schemas.job import Job, JobStage
from talenthub.schemas.offer import Offer

logger = logging.getLogger("talenthub.stats")

DEFAULT_UPCOMING_DAYS = 7


def count_active_jobs(jobs: Iterable[Job]) -> int:
    return sum(1 for job in jobs if job.status == JOB_ACTIVE)


def is_upcoming(interview: Interview, now: datetime, days: int = DEFAULT_UPCOMING_DAYS) -> bool:
    if interview.status != INTERVIEW_SCHEDULED:
        return False
    scheduled_at = to_utc(interview.scheduled_at)
    now = to_utc(now)
    return now <= scheduled_at <= now + timedelta(days=days)


def _applied_on(application: Application) -> date:
    return to_utc(application.applied_at).date()


class StatsEngine:
    """Denormalized dashboard counters for one store.

    ``active_jobs`` and ``interviews_this_week`` are rebuilt by rescanning
    their source collections. The stage buckets, the hire-time average and
    the timeline are adjusted by deltas and are only recomputed from source
    data by an explicit ``rebuild``.

    Stage buckets are keyed by stage id and resolved to the stage's latest
    known name when a snapshot is taken, so renaming a stage carries its count
    along and deleted stages keep reporting under their last name.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = utc_now,
        upcoming_days: int = DEFAULT_UPCOMING_DAYS,
    ) -> None:
        self._clock = clock
        self.upcoming_days = upcoming_days
        self.active_jobs = 0
        self.total_candidates = 0
        self.interviews_this_week = 0
        self.avg_time_to_hire = 0
        self._stage_counts: dict[int, int] = {}
        self._stage_names: dict[int, str] = {}
        self._timeline: dict[date, int] = {}
        self.updated_at = clock()

    def _touch(self) -> None:
        self.updated_at = self._clock()

    # Full rescans.

    def refresh_active_jobs(self, jobs: Iterable[Job]) -> None:
        self.active_jobs = count_active_jobs(jobs)
        self._touch()

    def refresh_total_candidates(self, total: int) -> None:
        self.total_candidates = total
        self._touch()

    def refresh_interviews_this_week(self, interviews: Iterable[Interview]) -> None:
        now = self._clock()
        self.interviews_this_week = sum(1 for item in interviews if is_upcoming(item, now, self.upcoming_days))
        self._touch()

    # Stage buckets.

    def register_stage(self, stage: JobStage) -> None:
        previous = self._stage_names.get(stage.id)
        self._stage_names[stage.id] = stage.name
        if previous is not None and previous != stage.name:
            logger.info(
                "stage_bucket_renamed",
                extra={"stage_id": stage.id, "from_name": previous, "to_name": stage.name},
            )

    def _bump(self, stage_id: int, delta: int) -> None:
        current = self._stage_counts.get(stage_id, 0)
        self._stage_counts[stage_id] = max(0, current + delta)

    def application_added(self, application: Application) -> None:
        self._bump(application.stage_id, 1)
        day = _applied_on(application)
        self._timeline[day] = self._timeline.get(day, 0) + 1
        self._touch()

    def application_moved(self, from_stage_id: int, to_stage_id: int) -> None:
        if from_stage_id == to_stage_id:
            return
        self._bump(from_stage_id, -1)
        self._bump(to_stage_id, 1)
        self._touch()

    def application_removed(self, application: Application) -> None:
        self._bump(application.stage_id, -1)
        day = _applied_on(application)
        remaining = self._timeline.get(day, 0) - 1
        if remaining > 0:
            self._timeline[day] = remaining
        else:
            self._timeline.pop(day, None)
        self._touch()

    # Time to hire.

    def offer_accepted(self, sample_days: int, accepted_count: int) -> None:
        """Fold one hire into the running average; accepted_count includes this offer."""
        if accepted_count < 1:
            return
        previous = self.avg_time_to_hire
        self.avg_time_to_hire = round_half_up(
            (previous * (accepted_count - 1) + sample_days) / accepted_count
        )
        logger.info(
            "avg_time_to_hire_updated",
            extra={
                "sample_days": sample_days,
                "accepted_count": accepted_count,
                "previous": previous,
                "current": self.avg_time_to_hire,
            },
        )
        self._touch()

    # Snapshots.

    def candidates_by_stage(self) -> dict[str, int]:
        by_name: dict[str, int] = defaultdict(int)
        for stage_id, count in self._stage_counts.items():
            name = self._stage_names.get(stage_id)
            if name is None:
                continue
            by_name[name] += count
        return dict(by_name)

    def snapshot(self) -> DashboardStats:
        return DashboardStats(
            active_jobs=self.active_jobs,
            total_candidates=self.total_candidates,
            interviews_this_week=self.interviews_this_week,
            avg_time_to_hire=self.avg_time_to_hire,
            candidates_by_stage=self.candidates_by_stage(),
            applications_timeline=[
                TimelinePoint(date=day, count=count) for day, count in sorted(self._timeline.items())
            ],
            updated_at=self.updated_at,
        )

    def rebuild(
        self,
        *,
        jobs: Iterable[Job],
        stages: Iterable[JobStage],
        candidate_total: int,
        applications: Iterable[Application],
        interviews: Iterable[Interview],
        offers: Iterable[Offer],
    ) -> None:
        """Recompute every counter from source records."""
        applications = list(applications)
        for stage in stages:
            self._stage_names[stage.id] = stage.name

        self.active_jobs = count_active_jobs(jobs)
        self.total_candidates = candidate_total
        self.refresh_interviews_this_week(interviews)

        # Known stage ids stay present at zero so emptied buckets keep showing.
        self._stage_counts = {stage_id: 0 for stage_id in self._stage_counts}
        self._timeline = {}
        for application in applications:
            self._stage_counts[application.stage_id] = self._stage_counts.get(application.stage_id, 0) + 1
            day = _applied_on(application)
            self._timeline[day] = self._timeline.get(day, 0) + 1

        applied_at = {application.id: application.applied_at for application in applications}
        samples = [
            whole_days_between(applied_at[offer.application_id], offer.accepted_at)
            for offer in offers
            if offer.status == OFFER_ACCEPTED
            and offer.accepted_at is not None
            and offer.application_id in applied_at
        ]
        self.avg_time_to_hire = round_half_up(sum(samples) / len(samples)) if samples else 0
        logger.info(
            "stats_rebuilt",
            extra={"applications": len(applications), "hire_samples": len(samples)},
        )
        self._touch()

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Literal, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from talenthub.core.datetime_utils import to_utc, utc_now, whole_days_between
from talenthub.core.errors import ValidationError
from talenthub.core.pipeline import default_stage_payloads, sort_stages, stage_belongs_to_job
from talenthub.core.statuses import OFFER_ACCEPTED
from talenthub.schemas.application import Application, ApplicationCreate, ApplicationUpdate
from talenthub.schemas.candidate import Candidate, CandidateCreate, CandidateUpdate
from talenthub.schemas.dashboard import DashboardStats
from talenthub.schemas.interview import Interview, InterviewCreate, InterviewUpdate
from talenthub.schemas.job import Job, JobCreate, JobStage, JobStageCreate, JobStageUpdate, JobUpdate
from talenthub.schemas.offer import Offer, OfferCreate, OfferUpdate
from talenthub.schemas.user import User, UserCreate
from talenthub.store.collection import EntityCollection
from talenthub.store.stats import DEFAULT_UPCOMING_DAYS, StatsEngine, is_upcoming

logger = logging.getLogger("talenthub.store")

JobDeletePolicy = Literal["orphan", "cascade", "reject"]
Payload = Union[BaseModel, dict[str, Any]]


def _payload(model: type[BaseModel], data: Payload, message: str, *, partial: bool = False) -> dict[str, Any]:
    try:
        parsed = data if isinstance(data, model) else model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, message) from exc
    # Partial payloads only carry the fields the caller actually supplied.
    return parsed.model_dump(exclude_unset=partial)


class RecruitmentStore:
    """Process-local record store for the recruitment dashboard.

    Owns one collection per entity type plus the dashboard counters. Every
    public operation runs under a single re-entrant lock, so reference checks,
    the write itself, cascades and the counter adjustments land as one unit.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = utc_now,
        upcoming_interview_days: int = DEFAULT_UPCOMING_DAYS,
        job_delete_policy: JobDeletePolicy = "orphan",
    ) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self.upcoming_interview_days = upcoming_interview_days
        self.job_delete_policy = job_delete_policy

        self._users: EntityCollection[User] = EntityCollection("user", User)
        self._jobs: EntityCollection[Job] = EntityCollection("job", Job)
        self._stages: EntityCollection[JobStage] = EntityCollection("stage", JobStage)
        self._candidates: EntityCollection[Candidate] = EntityCollection("candidate", Candidate)
        self._applications: EntityCollection[Application] = EntityCollection("application", Application)
        self._interviews: EntityCollection[Interview] = EntityCollection("interview", Interview)
        self._offers: EntityCollection[Offer] = EntityCollection("offer", Offer)

        self._stats = StatsEngine(clock=clock, upcoming_days=upcoming_interview_days)

    @classmethod
    def from_settings(cls, settings, *, clock: Callable[[], datetime] = utc_now) -> "RecruitmentStore":
        return cls(
            clock=clock,
            upcoming_interview_days=settings.upcoming_interview_days,
            job_delete_policy=settings.job_delete_policy,
        )

    def now(self) -> datetime:
        return self._clock()

    # Users

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            matches = self._users.find(lambda user: user.username == username)
            return matches[0] if matches else None

    def list_users(self) -> list[User]:
        with self._lock:
            return self._users.list()

    def create_user(self, data: Payload) -> User:
        with self._lock:
            payload = _payload(UserCreate, data, "Invalid user data")
            if self._users.find(lambda user: user.username == payload["username"]):
                raise ValidationError.for_field("username", "Username already exists")
            return self._users.create(payload)

    # Jobs

    def list_jobs(self) -> list[Job]:
        with self._lock:
            return self._jobs.list()

    def get_job(self, job_id: int) -> Job | None:
        with self._lock:
            return self._jobs.get(job_id)

    def create_job(self, data: Payload) -> Job:
        with self._lock:
            payload = _payload(JobCreate, data, "Invalid job data")
            payload["created_at"] = self.now()
            job = self._jobs.create(payload)
            for stage_payload in default_stage_payloads(job.id):
                self._stats.register_stage(self._stages.create(stage_payload))
            self._stats.refresh_active_jobs(self._jobs.iter_records())
            logger.info("job_created", extra={"job_id": job.id, "status": job.status})
            return job

    def update_job(self, job_id: int, data: Payload) -> Job | None:
        with self._lock:
            if job_id not in self._jobs:
                return None
            changes = _payload(JobUpdate, data, "Invalid job data", partial=True)
            job = self._jobs.update(job_id, changes)
            self._stats.refresh_active_jobs(self._jobs.iter_records())
            return job

    def delete_job(self, job_id: int) -> bool:
        with self._lock:
            if job_id not in self._jobs:
                return False
            dependents = [app for app in self._applications.iter_records() if app.job_id == job_id]
            if dependents and self.job_delete_policy == "reject":
                logger.warning(
                    "job_delete_rejected",
                    extra={"job_id": job_id, "applications": len(dependents)},
                )
                raise ValidationError.for_field("jobId", "Job still has applications")

            self._jobs.delete(job_id)
            stage_ids = [stage.id for stage in self._stages.iter_records() if stage.job_id == job_id]
            for stage_id in stage_ids:
                self._stages.delete(stage_id)

            if self.job_delete_policy == "cascade":
                for application in dependents:
                    self._remove_application(application, with_children=True)
                self._stats.refresh_interviews_this_week(self._interviews.iter_records())

            self._stats.refresh_active_jobs(self._jobs.iter_records())
            logger.info(
                "job_deleted",
                extra={
                    "job_id": job_id,
                    "stages_removed": len(stage_ids),
                    "applications": len(dependents),
                    "policy": self.job_delete_policy,
                },
            )
            return True

    # Job stages

    def list_job_stages(self, job_id: int) -> list[JobStage]:
        with self._lock:
            return sort_stages(self._stages.find(lambda stage: stage.job_id == job_id))

    def get_job_stage(self, stage_id: int) -> JobStage | None:
        with self._lock:
            return self._stages.get(stage_id)

    def create_job_stage(self, data: Payload) -> JobStage:
        with self._lock:
            payload = _payload(JobStageCreate, data, "Invalid stage data")
            if payload["job_id"] not in self._jobs:
                raise ValidationError.for_field("jobId", "Job not found")
            stage = self._stages.create(payload)
            self._stats.register_stage(stage)
            return stage

    def update_job_stage(self, stage_id: int, data: Payload) -> JobStage | None:
        with self._lock:
            if stage_id not in self._stages:
                return None
            changes = _payload(JobStageUpdate, data, "Invalid stage data", partial=True)
            new_job_id = changes.get("job_id")
            if new_job_id is not None and new_job_id != self._stages.peek(stage_id).job_id:
                if new_job_id not in self._jobs:
                    raise ValidationError.for_field("jobId", "Job not found")
                # Applications in this stage would end up pointing at another job's stage.
                occupants = self._applications.find(lambda app: app.stage_id == stage_id)
                if occupants:
                    logger.warning(
                        "stage_reassign_rejected",
                        extra={"stage_id": stage_id, "job_id": new_job_id, "applications": len(occupants)},
                    )
                    raise ValidationError.for_field("jobId", "Stage still has applications")
            stage = self._stages.update(stage_id, changes)
            self._stats.register_stage(stage)
            return stage

    def delete_job_stage(self, stage_id: int) -> bool:
        # Applications left in the stage are orphaned; their bucket keeps the stage's last name.
        with self._lock:
            occupants = self._applications.find(lambda app: app.stage_id == stage_id)
            deleted = self._stages.delete(stage_id)
            if deleted and occupants:
                logger.info(
                    "stage_deleted_with_applications",
                    extra={"stage_id": stage_id, "applications": len(occupants)},
                )
            return deleted

    # Candidates

    def list_candidates(self) -> list[Candidate]:
        with self._lock:
            return self._candidates.list()

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        with self._lock:
            return self._candidates.get(candidate_id)

    def create_candidate(self, data: Payload) -> Candidate:
        with self._lock:
            payload = _payload(CandidateCreate, data, "Invalid candidate data")
            payload["created_at"] = self.now()
            candidate = self._candidates.create(payload)
            self._stats.refresh_total_candidates(len(self._candidates))
            return candidate

    def update_candidate(self, candidate_id: int, data: Payload) -> Candidate | None:
        with self._lock:
            if candidate_id not in self._candidates:
                return None
            changes = _payload(CandidateUpdate, data, "Invalid candidate data", partial=True)
            return self._candidates.update(candidate_id, changes)

    def delete_candidate(self, candidate_id: int) -> bool:
        with self._lock:
            deleted = self._candidates.delete(candidate_id)
            if deleted:
                self._stats.refresh_total_candidates(len(self._candidates))
            return deleted

    # Applications

    def list_applications(self) -> list[Application]:
        with self._lock:
            return self._applications.list()

    def list_applications_by_job(self, job_id: int) -> list[Application]:
        with self._lock:
            return self._applications.find(lambda app: app.job_id == job_id)

    def list_applications_by_candidate(self, candidate_id: int) -> list[Application]:
        with self._lock:
            return self._applications.find(lambda app: app.candidate_id == candidate_id)

    def list_applications_by_stage(self, stage_id: int) -> list[Application]:
        with self._lock:
            return self._applications.find(lambda app: app.stage_id == stage_id)

    def get_application(self, application_id: int) -> Application | None:
        with self._lock:
            return self._applications.get(application_id)

    def _require_stage_for_job(self, stage_id: int, job_id: int) -> None:
        stage = self._stages.peek(stage_id)
        if stage is None:
            raise ValidationError.for_field("stageId", "Stage not found")
        if not stage_belongs_to_job(stage, job_id):
            logger.warning(
                "stage_job_mismatch",
                extra={"stage_id": stage_id, "stage_job_id": stage.job_id, "job_id": job_id},
            )
            raise ValidationError.for_field("stageId", "Stage does not belong to this job")

    def create_application(self, data: Payload) -> Application:
        with self._lock:
            payload = _payload(ApplicationCreate, data, "Invalid application data")
            if payload["candidate_id"] not in self._candidates:
                raise ValidationError.for_field("candidateId", "Candidate not found")
            if payload["job_id"] not in self._jobs:
                raise ValidationError.for_field("jobId", "Job not found")
            self._require_stage_for_job(payload["stage_id"], payload["job_id"])

            now = self.now()
            payload["applied_at"] = now
            payload["updated_at"] = now
            application = self._applications.create(payload)
            self._stats.application_added(application)
            return application

    def update_application(self, application_id: int, data: Payload) -> Application | None:
        with self._lock:
            existing = self._applications.peek(application_id)
            if existing is None:
                return None
            changes = _payload(ApplicationUpdate, data, "Invalid application data", partial=True)

            new_stage_id = changes.get("stage_id")
            new_job_id = changes.get("job_id")
            stage_changed = new_stage_id is not None and new_stage_id != existing.stage_id
            job_changed = new_job_id is not None and new_job_id != existing.job_id
            if stage_changed or job_changed:
                self._require_stage_for_job(
                    new_stage_id if new_stage_id is not None else existing.stage_id,
                    new_job_id if new_job_id is not None else existing.job_id,
                )

            changes["updated_at"] = self.now()
            previous_stage_id = existing.stage_id
            application = self._applications.update(application_id, changes)
            if stage_changed:
                self._stats.application_moved(previous_stage_id, application.stage_id)
                logger.info(
                    "application_stage_changed",
                    extra={
                        "application_id": application_id,
                        "from_stage_id": previous_stage_id,
                        "to_stage_id": application.stage_id,
                    },
                )
            return application

    def move_application_to_stage(self, application_id: int, stage_id: int) -> Application | None:
        return self.update_application(application_id, {"stage_id": stage_id})

    def _remove_application(self, application: Application, *, with_children: bool) -> None:
        self._applications.delete(application.id)
        self._stats.application_removed(application)
        if not with_children:
            return
        for interview in [i for i in self._interviews.iter_records() if i.application_id == application.id]:
            self._interviews.delete(interview.id)
        for offer in [o for o in self._offers.iter_records() if o.application_id == application.id]:
            self._offers.delete(offer.id)

    def delete_application(self, application_id: int) -> bool:
        with self._lock:
            application = self._applications.peek(application_id)
            if application is None:
                return False
            self._remove_application(application, with_children=False)
            return True

    # Interviews

    def list_interviews(self) -> list[Interview]:
        with self._lock:
            return self._interviews.list()

    def list_interviews_by_application(self, application_id: int) -> list[Interview]:
        with self._lock:
            return self._interviews.find(lambda interview: interview.application_id == application_id)

    def list_upcoming_interviews(self) -> list[Interview]:
        with self._lock:
            now = self.now()
            upcoming = self._interviews.find(
                lambda interview: is_upcoming(interview, now, self.upcoming_interview_days)
            )
            return sorted(upcoming, key=lambda interview: to_utc(interview.scheduled_at))

    def get_interview(self, interview_id: int) -> Interview | None:
        with self._lock:
            return self._interviews.get(interview_id)

    def create_interview(self, data: Payload) -> Interview:
        with self._lock:
            payload = _payload(InterviewCreate, data, "Invalid interview data")
            if payload["application_id"] not in self._applications:
                raise ValidationError.for_field("applicationId", "Application not found")
            interview = self._interviews.create(payload)
            self._stats.refresh_interviews_this_week(self._interviews.iter_records())
            return interview

    def update_interview(self, interview_id: int, data: Payload) -> Interview | None:
        with self._lock:
            if interview_id not in self._interviews:
                return None
            changes = _payload(InterviewUpdate, data, "Invalid interview data", partial=True)
            interview = self._interviews.update(interview_id, changes)
            self._stats.refresh_interviews_this_week(self._interviews.iter_records())
            return interview

    def delete_interview(self, interview_id: int) -> bool:
        with self._lock:
            deleted = self._interviews.delete(interview_id)
            if deleted:
                self._stats.refresh_interviews_this_week(self._interviews.iter_records())
            return deleted

    # Offers

    def list_offers(self) -> list[Offer]:
        with self._lock:
            return self._offers.list()

    def list_offers_by_application(self, application_id: int) -> list[Offer]:
        with self._lock:
            return self._offers.find(lambda offer: offer.application_id == application_id)

    def get_offer(self, offer_id: int) -> Offer | None:
        with self._lock:
            return self._offers.get(offer_id)

    def create_offer(self, data: Payload) -> Offer:
        with self._lock:
            payload = _payload(OfferCreate, data, "Invalid offer data")
            if payload["application_id"] not in self._applications:
                raise ValidationError.for_field("applicationId", "Application not found")
            payload["created_at"] = self.now()
            # Created directly as accepted: no transition, so the hire average is untouched.
            return self._offers.create(payload)

    def update_offer(self, offer_id: int, data: Payload) -> Offer | None:
        with self._lock:
            existing = self._offers.peek(offer_id)
            if existing is None:
                return None
            changes = _payload(OfferUpdate, data, "Invalid offer data", partial=True)
            accepted_now = changes.get("status") == OFFER_ACCEPTED and existing.status != OFFER_ACCEPTED
            now = self.now()
            if accepted_now:
                changes["accepted_at"] = now
            offer = self._offers.update(offer_id, changes)

            if accepted_now:
                application = self._applications.peek(offer.application_id)
                if application is None:
                    logger.warning(
                        "accepted_offer_without_application",
                        extra={"offer_id": offer_id, "application_id": offer.application_id},
                    )
                else:
                    accepted = sum(1 for item in self._offers.iter_records() if item.status == OFFER_ACCEPTED)
                    self._stats.offer_accepted(whole_days_between(application.applied_at, now), accepted)
            return offer

    def delete_offer(self, offer_id: int) -> bool:
        with self._lock:
            return self._offers.delete(offer_id)

    # Dashboard

    def get_dashboard_stats(self) -> DashboardStats:
        with self._lock:
            return self._stats.snapshot()

    def rebuild_stats(self) -> DashboardStats:
        with self._lock:
            self._stats.rebuild(
                jobs=self._jobs.iter_records(),
                stages=self._stages.iter_records(),
                candidate_total=len(self._candidates),
                applications=self._applications.iter_records(),
                interviews=self._interviews.iter_records(),
                offers=self._offers.iter_records(),
            )
            return self._stats.snapshot()

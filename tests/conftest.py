from datetime import datetime, timedelta, timezone

import pytest

from talenthub.store.memory import RecruitmentStore


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 3, 9, 0, tzinfo=timezone.utc))


@pytest.fixture()
def store(clock: FakeClock) -> RecruitmentStore:
    return RecruitmentStore(clock=clock)


@pytest.fixture()
def make_job(store):
    def _make_job(**overrides):
        payload = {
            "title": "Backend Engineer",
            "department": "Engineering",
            "location": "Remote",
            "description": "Build services.",
            "requirements": "Python",
            "type": "full-time",
            "status": "active",
            "created_by": 1,
        }
        payload.update(overrides)
        return store.create_job(payload)

    return _make_job


@pytest.fixture()
def make_candidate(store):
    def _make_candidate(**overrides):
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}
        payload.update(overrides)
        return store.create_candidate(payload)

    return _make_candidate


@pytest.fixture()
def make_application(store, make_job, make_candidate):
    def _make_application(job=None, candidate=None, stage=None, **overrides):
        job = job or make_job()
        candidate = candidate or make_candidate()
        stage = stage or store.list_job_stages(job.id)[0]
        payload = {"candidate_id": candidate.id, "job_id": job.id, "stage_id": stage.id}
        payload.update(overrides)
        return store.create_application(payload)

    return _make_application

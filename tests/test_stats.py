from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from talenthub.core.errors import ValidationError
from talenthub.store.memory import RecruitmentStore


def _offer_payload(application_id, **overrides):
    payload = {
        "application_id": application_id,
        "salary": "120k",
        "start_date": "2025-05-01T00:00:00Z",
        "expiry_date": "2025-04-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def _interview_payload(application_id, scheduled_at, **overrides):
    payload = {
        "application_id": application_id,
        "title": "Technical",
        "type": "technical",
        "scheduled_at": scheduled_at,
        "duration": 60,
    }
    payload.update(overrides)
    return payload


def test_stats_start_empty(store, clock):
    stats = store.get_dashboard_stats()
    assert stats.active_jobs == 0
    assert stats.total_candidates == 0
    assert stats.interviews_this_week == 0
    assert stats.avg_time_to_hire == 0
    assert stats.candidates_by_stage == {}
    assert stats.applications_timeline == []
    assert stats.updated_at == clock.current


def test_active_jobs_follow_status_changes(store, make_job):
    active = make_job()
    draft = make_job(status="draft")
    assert store.get_dashboard_stats().active_jobs == 1

    store.update_job(draft.id, {"status": "active"})
    assert store.get_dashboard_stats().active_jobs == 2

    store.update_job(active.id, {"status": "closed"})
    assert store.get_dashboard_stats().active_jobs == 1

    store.delete_job(draft.id)
    assert store.get_dashboard_stats().active_jobs == 0


def test_total_candidates_tracks_collection_size(store, make_candidate):
    first = make_candidate()
    make_candidate(email="b@example.com")
    assert store.get_dashboard_stats().total_candidates == 2

    store.delete_candidate(first.id)
    assert store.get_dashboard_stats().total_candidates == 1

    store.delete_candidate(first.id)
    assert store.get_dashboard_stats().total_candidates == 1


def test_interviews_this_week_is_rescanned(store, make_application, clock):
    application = make_application()
    soon = store.create_interview(_interview_payload(application.id, clock.current + timedelta(days=2)))
    store.create_interview(_interview_payload(application.id, clock.current + timedelta(days=9)))
    assert store.get_dashboard_stats().interviews_this_week == 1

    store.update_interview(soon.id, {"status": "completed"})
    assert store.get_dashboard_stats().interviews_this_week == 0

    store.update_interview(soon.id, {"status": "scheduled"})
    assert store.get_dashboard_stats().interviews_this_week == 1

    store.delete_interview(soon.id)
    assert store.get_dashboard_stats().interviews_this_week == 0


def test_stage_move_adjusts_buckets(store, make_job, make_candidate):
    job = make_job()
    candidate = make_candidate()
    stage1, stage2 = store.list_job_stages(job.id)[:2]
    application = store.create_application(
        {"candidate_id": candidate.id, "job_id": job.id, "stage_id": stage1.id}
    )
    assert store.get_dashboard_stats().candidates_by_stage["New Applications"] == 1

    moved = store.move_application_to_stage(application.id, stage2.id)

    assert moved.stage_id == stage2.id
    buckets = store.get_dashboard_stats().candidates_by_stage
    assert buckets["New Applications"] == 0
    assert buckets["Screening"] == 1


def test_buckets_sum_across_jobs_with_same_stage_name(store, make_job, make_application):
    make_application(job=make_job())
    make_application(job=make_job(title="Designer"))
    assert store.get_dashboard_stats().candidates_by_stage == {"New Applications": 2}


def test_generic_update_with_stage_moves_bucket(store, make_application):
    application = make_application()
    target = store.list_job_stages(application.job_id)[3]

    store.update_application(application.id, {"stage_id": target.id, "status": "in-progress"})

    buckets = store.get_dashboard_stats().candidates_by_stage
    assert buckets == {"New Applications": 0, "Interview": 1}


def test_update_without_stage_change_leaves_buckets(store, make_application):
    application = make_application()
    store.update_application(application.id, {"stage_id": application.stage_id, "notes": "same stage"})
    assert store.get_dashboard_stats().candidates_by_stage == {"New Applications": 1}


def test_application_delete_decrements_bucket_with_floor(store, make_application):
    application = make_application()
    assert store.delete_application(application.id) is True
    assert store.get_dashboard_stats().candidates_by_stage == {"New Applications": 0}
    assert store.delete_application(application.id) is False
    assert store.get_dashboard_stats().candidates_by_stage == {"New Applications": 0}


def test_renamed_stage_carries_its_count(store, make_application):
    application = make_application()
    store.update_job_stage(application.stage_id, {"name": "Inbox"})
    assert store.get_dashboard_stats().candidates_by_stage == {"Inbox": 1}


def test_timeline_counts_applications_per_day(store, make_job, make_application, clock):
    job = make_job()
    first = make_application(job=job)
    make_application(job=job)
    clock.advance(days=1)
    make_application(job=job)

    timeline = store.get_dashboard_stats().applications_timeline
    assert [(point.date, point.count) for point in timeline] == [
        (date(2025, 3, 3), 2),
        (date(2025, 3, 4), 1),
    ]

    store.delete_application(first.id)
    timeline = store.get_dashboard_stats().applications_timeline
    assert [(point.date, point.count) for point in timeline] == [
        (date(2025, 3, 3), 1),
        (date(2025, 3, 4), 1),
    ]


def test_first_accepted_offer_sets_average(store, make_application, clock):
    application = make_application()
    offer = store.create_offer(_offer_payload(application.id, status="draft"))

    accepted_at = clock.advance(days=12, hours=20)
    updated = store.update_offer(offer.id, {"status": "accepted"})

    assert updated.accepted_at == accepted_at
    assert store.get_dashboard_stats().avg_time_to_hire == 12


def test_running_average_rounds_half_up(store, make_application, clock):
    first = make_application()
    second = make_application()
    offer_one = store.create_offer(_offer_payload(first.id))
    offer_two = store.create_offer(_offer_payload(second.id, status="sent"))

    clock.advance(days=10)
    store.update_offer(offer_one.id, {"status": "accepted"})
    assert store.get_dashboard_stats().avg_time_to_hire == 10

    clock.advance(days=1)
    store.update_offer(offer_two.id, {"status": "accepted"})
    # (10 * 1 + 11) / 2 = 10.5
    assert store.get_dashboard_stats().avg_time_to_hire == 11


def test_offer_created_as_accepted_does_not_move_average(store, make_application, clock):
    application = make_application()
    clock.advance(days=30)
    offer = store.create_offer(_offer_payload(application.id, status="accepted"))

    assert offer.accepted_at is None
    assert store.get_dashboard_stats().avg_time_to_hire == 0


def test_reaccepting_or_deleting_offer_leaves_average(store, make_application, clock):
    application = make_application()
    offer = store.create_offer(_offer_payload(application.id))
    clock.advance(days=6)
    store.update_offer(offer.id, {"status": "accepted"})

    clock.advance(days=20)
    store.update_offer(offer.id, {"status": "accepted", "notes": "signed"})
    assert store.get_dashboard_stats().avg_time_to_hire == 6

    store.update_offer(offer.id, {"status": "rejected"})
    store.delete_offer(offer.id)
    assert store.get_dashboard_stats().avg_time_to_hire == 6


def test_acceptance_without_application_leaves_average(store, make_application, clock):
    application = make_application()
    offer = store.create_offer(_offer_payload(application.id))
    store.delete_application(application.id)
    clock.advance(days=3)

    updated = store.update_offer(offer.id, {"status": "accepted"})

    assert updated.status == "accepted"
    assert store.get_dashboard_stats().avg_time_to_hire == 0


def test_rebuild_recovers_from_drift(store, make_application, clock):
    application = make_application()
    offer = store.create_offer(_offer_payload(application.id))
    clock.advance(days=8)
    store.update_offer(offer.id, {"status": "accepted"})
    store.update_offer(offer.id, {"status": "rejected"})
    assert store.get_dashboard_stats().avg_time_to_hire == 8

    stats = store.rebuild_stats()

    assert stats.avg_time_to_hire == 0
    assert stats.candidates_by_stage == {"New Applications": 1}
    assert stats.active_jobs == 1
    assert stats.total_candidates == 1
    assert [point.count for point in stats.applications_timeline] == [1]


def test_parallel_writes_keep_buckets_consistent(store, make_job, make_candidate):
    job = make_job()
    candidate = make_candidate()
    stages = store.list_job_stages(job.id)
    workers = 8
    per_worker = 25

    def _work(worker: int) -> list[int]:
        created = []
        for step in range(per_worker):
            application = store.create_application(
                {"candidate_id": candidate.id, "job_id": job.id, "stage_id": stages[0].id}
            )
            created.append(application.id)
            if (worker + step) % 3 == 0:
                store.delete_application(application.id)
            else:
                store.move_application_to_stage(application.id, stages[(worker + step) % len(stages)].id)
        return created

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(_work, range(workers)))

    for created in results:
        assert created == sorted(created)
        assert len(set(created)) == len(created)
    all_ids = sorted(application_id for created in results for application_id in created)
    assert all_ids == list(range(all_ids[0], all_ids[0] + workers * per_worker))

    incremental = store.get_dashboard_stats().candidates_by_stage
    assert sum(incremental.values()) == len(store.list_applications())
    assert store.rebuild_stats().candidates_by_stage == incremental


def test_job_delete_orphans_applications_by_default(store, make_application):
    application = make_application()
    store.delete_job(application.job_id)

    assert store.get_application(application.id) is not None
    assert store.get_dashboard_stats().candidates_by_stage == {"New Applications": 1}


def test_job_delete_cascade_policy(clock):
    store = RecruitmentStore(clock=clock, job_delete_policy="cascade")
    job = store.create_job(
        {
            "title": "Ops",
            "department": "IT",
            "location": "Remote",
            "description": "d",
            "requirements": "r",
            "type": "full-time",
            "status": "active",
            "created_by": 1,
        }
    )
    candidate = store.create_candidate({"first_name": "Lin", "last_name": "Wu", "email": "lin@example.com"})
    application = store.create_application(
        {"candidate_id": candidate.id, "job_id": job.id, "stage_id": store.list_job_stages(job.id)[0].id}
    )
    store.create_interview(_interview_payload(application.id, clock.current + timedelta(days=1)))
    store.create_offer(_offer_payload(application.id))
    assert store.get_dashboard_stats().interviews_this_week == 1

    assert store.delete_job(job.id) is True

    assert store.list_applications() == []
    assert store.list_interviews() == []
    assert store.list_offers() == []
    stats = store.get_dashboard_stats()
    assert stats.candidates_by_stage == {"New Applications": 0}
    assert stats.interviews_this_week == 0
    assert stats.active_jobs == 0
    assert store.get_candidate(candidate.id) is not None


def test_job_delete_reject_policy(clock):
    store = RecruitmentStore(clock=clock, job_delete_policy="reject")
    job = store.create_job(
        {
            "title": "Ops",
            "department": "IT",
            "location": "Remote",
            "description": "d",
            "requirements": "r",
            "type": "full-time",
            "created_by": 1,
        }
    )
    candidate = store.create_candidate({"first_name": "Lin", "last_name": "Wu", "email": "lin@example.com"})
    application = store.create_application(
        {"candidate_id": candidate.id, "job_id": job.id, "stage_id": store.list_job_stages(job.id)[0].id}
    )

    with pytest.raises(ValidationError):
        store.delete_job(job.id)
    assert store.get_job(job.id) is not None
    assert len(store.list_job_stages(job.id)) == 5

    store.delete_application(application.id)
    assert store.delete_job(job.id) is True

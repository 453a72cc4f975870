from __future__ import annotations

from typing import Iterable, Protocol

DEFAULT_STAGE_COLOR = "#3f51b5"

# Canonical hiring funnel generated for every new job: (name, order, color).
NEW_APPLICATIONS = "New Applications"
SCREENING = "Screening"
ASSESSMENT = "Assessment"
INTERVIEW = "Interview"
OFFER = "Offer"

DEFAULT_STAGES: tuple[tuple[str, int, str], ...] = (
    (NEW_APPLICATIONS, 1, "#6B7280"),
    (SCREENING, 2, "#F59E0B"),
    (ASSESSMENT, 3, "#3B82F6"),
    (INTERVIEW, 4, "#10B981"),
    (OFFER, 5, "#8B5CF6"),
)


class _StageLike(Protocol):
    id: int
    job_id: int
    order: int


def default_stage_payloads(job_id: int) -> list[dict]:
    return [
        {"name": name, "order": order, "job_id": job_id, "color": color}
        for name, order, color in DEFAULT_STAGES
    ]


def sort_stages(stages: Iterable[_StageLike]) -> list:
    # Orders need not be contiguous; ties fall back to creation order.
    return sorted(stages, key=lambda stage: (stage.order, stage.id))


def first_stage(stages: Iterable[_StageLike]):
    ordered = sort_stages(stages)
    return ordered[0] if ordered else None


def stage_belongs_to_job(stage: _StageLike | None, job_id: int) -> bool:
    return stage is not None and stage.job_id == job_id

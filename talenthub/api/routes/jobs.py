from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.job import Job, JobCreate, JobStage, JobStageCreate, JobStageUpdate, JobUpdate
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/jobs", tags=["jobs"])
stages_router = APIRouter(prefix="/job-stages", tags=["job-stages"])


@router.get("", response_model=list[Job])
async def list_jobs(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_jobs()


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    job = store.get_job(deps.parse_id(job_id, "job"))
    if job is None:
        raise NotFoundError("Job not found")
    return job


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
async def create_job(payload: JobCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_job(payload)


@router.put("/{job_id}", response_model=Job)
async def update_job(job_id: str, payload: JobUpdate, store: RecruitmentStore = Depends(deps.get_store)):
    job = store.update_job(deps.parse_id(job_id, "job"), payload)
    if job is None:
        raise NotFoundError("Job not found")
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_job(deps.parse_id(job_id, "job")):
        raise NotFoundError("Job not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{job_id}/stages", response_model=list[JobStage])
async def list_job_stages(job_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_job_stages(deps.parse_id(job_id, "job"))


@stages_router.post("", response_model=JobStage, status_code=status.HTTP_201_CREATED)
async def create_job_stage(payload: JobStageCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_job_stage(payload)


@stages_router.put("/{stage_id}", response_model=JobStage)
async def update_job_stage(stage_id: str, payload: JobStageUpdate, store: RecruitmentStore = Depends(deps.get_store)):
    stage = store.update_job_stage(deps.parse_id(stage_id, "stage"), payload)
    if stage is None:
        raise NotFoundError("Stage not found")
    return stage


@stages_router.delete("/{stage_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job_stage(stage_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_job_stage(deps.parse_id(stage_id, "stage")):
        raise NotFoundError("Stage not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.application import Application, ApplicationCreate, ApplicationUpdate
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[Application])
async def list_applications(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_applications()


@router.get("/job/{job_id}", response_model=list[Application])
async def list_applications_by_job(job_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_applications_by_job(deps.parse_id(job_id, "job"))


@router.get("/candidate/{candidate_id}", response_model=list[Application])
async def list_applications_by_candidate(candidate_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_applications_by_candidate(deps.parse_id(candidate_id, "candidate"))


@router.get("/stage/{stage_id}", response_model=list[Application])
async def list_applications_by_stage(stage_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_applications_by_stage(deps.parse_id(stage_id, "stage"))


@router.get("/{application_id}", response_model=Application)
async def get_application(application_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    application = store.get_application(deps.parse_id(application_id, "application"))
    if application is None:
        raise NotFoundError("Application not found")
    return application


@router.post("", response_model=Application, status_code=status.HTTP_201_CREATED)
async def create_application(payload: ApplicationCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_application(payload)


@router.put("/{application_id}", response_model=Application)
async def update_application(
    application_id: str,
    payload: ApplicationUpdate,
    store: RecruitmentStore = Depends(deps.get_store),
):
    application = store.update_application(deps.parse_id(application_id, "application"), payload)
    if application is None:
        raise NotFoundError("Application not found")
    return application


@router.put("/{application_id}/stage/{stage_id}", response_model=Application)
async def move_application_to_stage(
    application_id: str,
    stage_id: str,
    store: RecruitmentStore = Depends(deps.get_store),
):
    application = store.move_application_to_stage(
        deps.parse_id(application_id, "application"),
        deps.parse_id(stage_id, "stage"),
    )
    if application is None:
        raise NotFoundError("Application not found")
    return application


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(application_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_application(deps.parse_id(application_id, "application")):
        raise NotFoundError("Application not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

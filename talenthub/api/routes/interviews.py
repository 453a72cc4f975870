from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.interview import Interview, InterviewCreate, InterviewUpdate
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("", response_model=list[Interview])
async def list_interviews(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_interviews()


@router.get("/upcoming", response_model=list[Interview])
async def list_upcoming_interviews(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_upcoming_interviews()


@router.get("/application/{application_id}", response_model=list[Interview])
async def list_interviews_by_application(application_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_interviews_by_application(deps.parse_id(application_id, "application"))


@router.get("/{interview_id}", response_model=Interview)
async def get_interview(interview_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    interview = store.get_interview(deps.parse_id(interview_id, "interview"))
    if interview is None:
        raise NotFoundError("Interview not found")
    return interview


@router.post("", response_model=Interview, status_code=status.HTTP_201_CREATED)
async def create_interview(payload: InterviewCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_interview(payload)


@router.put("/{interview_id}", response_model=Interview)
async def update_interview(
    interview_id: str,
    payload: InterviewUpdate,
    store: RecruitmentStore = Depends(deps.get_store),
):
    interview = store.update_interview(deps.parse_id(interview_id, "interview"), payload)
    if interview is None:
        raise NotFoundError("Interview not found")
    return interview


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(interview_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_interview(deps.parse_id(interview_id, "interview")):
        raise NotFoundError("Interview not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.candidate import Candidate, CandidateCreate, CandidateUpdate
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=list[Candidate])
async def list_candidates(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_candidates()


@router.get("/{candidate_id}", response_model=Candidate)
async def get_candidate(candidate_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    candidate = store.get_candidate(deps.parse_id(candidate_id, "candidate"))
    if candidate is None:
        raise NotFoundError("Candidate not found")
    return candidate


@router.post("", response_model=Candidate, status_code=status.HTTP_201_CREATED)
async def create_candidate(payload: CandidateCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_candidate(payload)


@router.put("/{candidate_id}", response_model=Candidate)
async def update_candidate(
    candidate_id: str,
    payload: CandidateUpdate,
    store: RecruitmentStore = Depends(deps.get_store),
):
    candidate = store.update_candidate(deps.parse_id(candidate_id, "candidate"), payload)
    if candidate is None:
        raise NotFoundError("Candidate not found")
    return candidate


@router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_candidate(candidate_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_candidate(deps.parse_id(candidate_id, "candidate")):
        raise NotFoundError("Candidate not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

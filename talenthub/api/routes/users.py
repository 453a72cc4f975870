from __future__ import annotations

from fastapi import APIRouter, Depends, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.user import UserCreate, UserOut
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_user(payload)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    user = store.get_user(deps.parse_id(user_id, "user"))
    if user is None:
        raise NotFoundError("User not found")
    return user

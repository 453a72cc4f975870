from __future__ import annotations

from fastapi import APIRouter, Depends

from talenthub.api import deps
from talenthub.schemas.dashboard import DashboardStats
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/dashboard-stats", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard_stats(store: RecruitmentStore = Depends(deps.get_store)):
    return store.get_dashboard_stats()


@router.post("/rebuild", response_model=DashboardStats)
async def rebuild_dashboard_stats(store: RecruitmentStore = Depends(deps.get_store)):
    """Recompute every counter from source records, discarding drift from incremental updates."""
    return store.rebuild_stats()

"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from app.config import Settings
from app.dependencies import get_store, get_settings
from app.schemas.dashboard import DashboardData, DashboardResponse, MemberDetail, SummaryCards
from app.services.dashboard_service import load_dashboard, get_member_detail, build_summary
from app.services.exceptions import DashboardUnavailableError
from app.services.store import SavingsStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

EMPTY_MESSAGE = "Data tabungan belum tersedia"


async def _load(store: SavingsStore, settings: Settings) -> Optional[DashboardData]:
    try:
        return await load_dashboard(
            store,
            preferred_name=settings.preferred_group_name,
            unknown_member_label=settings.unknown_member_label,
        )
    except DashboardUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    store: SavingsStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Full dashboard snapshot for the active group.
    An empty database is not an error: available is False.
    """
    data = await _load(store, settings)
    if data is None:
        return DashboardResponse(available=False, message=EMPTY_MESSAGE)
    return DashboardResponse(available=True, data=data)


@router.get("/summary", response_model=SummaryCards)
async def get_dashboard_summary(
    store: SavingsStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Formatted figures for the summary tab."""
    data = await _load(store, settings)
    if data is None:
        raise HTTPException(status_code=404, detail=EMPTY_MESSAGE)
    return build_summary(data)


@router.get("/members/{member_id}", response_model=MemberDetail)
async def get_dashboard_member(
    member_id: str,
    store: SavingsStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """A member's stats and entries."""
    data = await _load(store, settings)
    if data is None:
        raise HTTPException(status_code=404, detail=EMPTY_MESSAGE)

    detail = get_member_detail(data, member_id)
    if not detail:
        raise HTTPException(status_code=404, detail="Member not found")
    return detail

"""
Dashboard schemas.
"""

from pydantic import BaseModel
import datetime
from typing import List, Optional
from app.models.entry import EntryType


class GroupStat(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    target_cents: int
    saved_cents: int
    progress_pct: float
    member_count: int

    class Config:
        frozen = True


class MemberStat(BaseModel):
    id: str
    name: str
    avatar_url: Optional[str] = None
    target_cents: int
    saved_cents: int
    progress_pct: float

    class Config:
        frozen = True


class EntryView(BaseModel):
    id: str
    member_id: str
    member_name: str
    amount_cents: int
    type: EntryType
    note: Optional[str] = None
    date: datetime.date

    class Config:
        frozen = True


class DashboardData(BaseModel):
    """Snapshot handed to the rendering layer."""
    group: GroupStat
    members: List[MemberStat]
    entries: List[EntryView]

    class Config:
        frozen = True


class DashboardResponse(BaseModel):
    available: bool
    data: Optional[DashboardData] = None
    message: Optional[str] = None


class MemberDetail(BaseModel):
    member: MemberStat
    entries: List[EntryView]
    entry_count: int

    class Config:
        frozen = True


class EntryCard(BaseModel):
    """Entry formatted for display."""
    id: str
    member_name: str
    type: EntryType
    amount: str
    date: str
    note: str


class SummaryCards(BaseModel):
    group_name: str
    progress: str
    saved: str
    target: str
    member_count: int
    transaction_count: int
    recent_entries: List[EntryCard]

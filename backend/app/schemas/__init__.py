"""
Pydantic schemas package.
"""

from app.schemas.savings import (
    GroupRow,
    MemberRow,
    EntryRow,
)
from app.schemas.dashboard import (
    GroupStat,
    MemberStat,
    EntryView,
    DashboardData,
    DashboardResponse,
    MemberDetail,
    SummaryCards,
    EntryCard,
)
from app.schemas.view_state import (
    DashboardTab,
    DashboardViewState,
)

__all__ = [
    "GroupRow",
    "MemberRow",
    "EntryRow",
    "GroupStat",
    "MemberStat",
    "EntryView",
    "DashboardData",
    "DashboardResponse",
    "MemberDetail",
    "SummaryCards",
    "EntryCard",
    "DashboardTab",
    "DashboardViewState",
]

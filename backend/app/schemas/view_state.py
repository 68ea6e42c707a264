"""
UI state for the tabbed dashboard view.

Lives outside the aggregation; every transition returns a new state.
"""

import enum
from pydantic import BaseModel
from typing import Optional

from app.schemas.dashboard import DashboardData


class DashboardTab(str, enum.Enum):
    summary = "summary"
    members = "members"
    transactions = "transactions"


class DashboardViewState(BaseModel):
    active_tab: DashboardTab = DashboardTab.summary
    selected_member_id: Optional[str] = None
    show_member_modal: bool = False

    class Config:
        frozen = True

    @classmethod
    def initial(cls, data: DashboardData) -> "DashboardViewState":
        """Summary tab with the first member preselected, modal closed."""
        first_member = data.members[0].id if data.members else None
        return cls(selected_member_id=first_member)

    def select_tab(self, tab: DashboardTab) -> "DashboardViewState":
        return self.model_copy(update={"active_tab": tab})

    def open_member(self, member_id: str) -> "DashboardViewState":
        return self.model_copy(update={
            "selected_member_id": member_id,
            "show_member_modal": True,
        })

    def close_member(self) -> "DashboardViewState":
        # Selection is kept so reopening shows the same member
        return self.model_copy(update={"show_member_modal": False})

"""
Database models package.
"""

from app.models.group import SavingGroup
from app.models.member import SavingGroupMember
from app.models.entry import SavingGroupEntry, EntryType

__all__ = [
    "SavingGroup",
    "SavingGroupMember",
    "SavingGroupEntry",
    "EntryType",
]

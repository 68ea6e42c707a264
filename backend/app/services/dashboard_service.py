"""Service for building the group savings dashboard snapshot."""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from app.models.entry import EntryType
from app.schemas.savings import GroupRow, MemberRow, EntryRow
from app.schemas.dashboard import (
    DashboardData,
    GroupStat,
    MemberStat,
    EntryView,
    MemberDetail,
    SummaryCards,
    EntryCard,
)
from app.services.formatting import format_currency, format_date, format_pct, entry_note
from app.services.store import SavingsStore

logger = logging.getLogger(__name__)

# Number of entries shown on the summary tab
RECENT_ENTRY_LIMIT = 4


def compute_progress_pct(saved_cents: int, target_cents: Optional[int]) -> float:
    """
    Saved amount as a percentage of target, capped at 100.

    No lower bound: a negative balance gives a negative percentage.
    A missing or zero target yields 0.
    """
    if not target_cents or target_cents <= 0:
        return 0.0
    return min(100.0, saved_cents / target_cents * 100)


def signed_amount(entry: EntryRow) -> int:
    if entry.type == EntryType.withdraw:
        return -entry.amount_cents
    return entry.amount_cents


def build_dashboard(
    group: GroupRow,
    members: Sequence[MemberRow],
    entries: Sequence[EntryRow],
    unknown_member_label: str,
) -> DashboardData:
    """
    Aggregate members and entries of one group into a dashboard snapshot.

    Entries are expected newest-first and keep that order in the output.
    Totals for member ids that are not in `members` still count towards
    the group total but never produce a member stat.
    """
    saved_by_member: Dict[str, int] = {}
    total_saved = 0
    for entry in entries:
        amount = signed_amount(entry)
        saved_by_member[entry.member_id] = saved_by_member.get(entry.member_id, 0) + amount
        total_saved += amount

    member_stats = []
    for member in members:
        saved = saved_by_member.get(member.id, 0)
        target = member.target_amount_cents or 0
        member_stats.append(MemberStat(
            id=member.id,
            name=member.display_name,
            avatar_url=member.avatar_url,
            target_cents=target,
            saved_cents=saved,
            progress_pct=compute_progress_pct(saved, target),
        ))

    names = {m.id: m.display_name for m in members}
    entry_views = [
        EntryView(
            id=e.id,
            member_id=e.member_id,
            member_name=names.get(e.member_id, unknown_member_label),
            amount_cents=e.amount_cents,
            type=e.type,
            note=e.note,
            date=e.transaction_date,
        )
        for e in entries
    ]

    return DashboardData(
        group=GroupStat(
            id=group.id,
            name=group.name,
            description=group.description,
            avatar_url=group.avatar_url,
            target_cents=group.target_total_cents,
            saved_cents=total_saved,
            progress_pct=compute_progress_pct(total_saved, group.target_total_cents),
            member_count=len(members),
        ),
        members=member_stats,
        entries=entry_views,
    )


def select_group(store: SavingsStore, preferred_name: str) -> Optional[GroupRow]:
    """
    Pick the group named `preferred_name`, else the earliest created one.

    Returns None when there are no groups at all. Store failures propagate.
    """
    group = store.find_group_by_name(preferred_name)
    if group is not None:
        return group

    logger.info(f"No group named '{preferred_name}', falling back to earliest group")
    return store.find_earliest_group()


async def load_dashboard(
    store: SavingsStore,
    preferred_name: str,
    unknown_member_label: str,
) -> Optional[DashboardData]:
    """
    Select the group, fetch members and entries in parallel and aggregate.

    Raises DashboardUnavailableError if any of the queries fails.
    """
    group = await asyncio.to_thread(select_group, store, preferred_name)
    if group is None:
        logger.info("No saving groups found")
        return None

    members, entries = await asyncio.gather(
        asyncio.to_thread(store.list_members, group.id),
        asyncio.to_thread(store.list_entries, group.id),
    )

    return build_dashboard(group, members, entries, unknown_member_label)


def get_member_detail(data: DashboardData, member_id: str) -> Optional[MemberDetail]:
    """Member stat together with that member's entries, newest first."""
    member = next((m for m in data.members if m.id == member_id), None)
    if member is None:
        return None

    entries: List[EntryView] = [e for e in data.entries if e.member_id == member_id]
    return MemberDetail(member=member, entries=entries, entry_count=len(entries))


def format_entry(entry: EntryView) -> EntryCard:
    return EntryCard(
        id=entry.id,
        member_name=entry.member_name,
        type=entry.type,
        amount=format_currency(entry.amount_cents),
        date=format_date(entry.date),
        note=entry_note(entry.note),
    )


def build_summary(data: DashboardData) -> SummaryCards:
    return SummaryCards(
        group_name=data.group.name,
        progress=format_pct(data.group.progress_pct),
        saved=format_currency(data.group.saved_cents),
        target=format_currency(data.group.target_cents),
        member_count=data.group.member_count,
        transaction_count=len(data.entries),
        recent_entries=[format_entry(e) for e in data.entries[:RECENT_ENTRY_LIMIT]],
    )

"""Read-only query layer over the savings tables."""

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.config import Settings
from app.database import build_engine, build_session_factory
from app.models.group import SavingGroup
from app.models.member import SavingGroupMember
from app.models.entry import SavingGroupEntry
from app.schemas.savings import GroupRow, MemberRow, EntryRow
from app.services.exceptions import StoreConfigurationError, DashboardUnavailableError

logger = logging.getLogger(__name__)


class SavingsStore:
    """
    Query access to groups, members and entries.

    Every call opens its own session, so member and entry reads can run
    in parallel threads. Rows come back as detached pydantic models.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "SavingsStore":
        if not settings.database_url:
            raise StoreConfigurationError("DATABASE_URL is not configured")
        engine = build_engine(settings.database_url)
        return cls(build_session_factory(engine))

    def _run(self, description: str, query):
        session: Session = self._session_factory()
        try:
            return query(session)
        except SQLAlchemyError as e:
            logger.error(f"Store query failed ({description}): {e}")
            raise DashboardUnavailableError(f"Failed to {description}") from e
        finally:
            session.close()

    def find_group_by_name(self, name: str) -> Optional[GroupRow]:
        def query(db: Session):
            group = db.query(SavingGroup).filter(
                SavingGroup.name == name
            ).limit(1).first()
            return GroupRow.model_validate(group) if group else None

        return self._run("find group by name", query)

    def find_earliest_group(self) -> Optional[GroupRow]:
        def query(db: Session):
            group = db.query(SavingGroup).order_by(
                SavingGroup.created_at.asc()
            ).limit(1).first()
            return GroupRow.model_validate(group) if group else None

        return self._run("find earliest group", query)

    def list_members(self, group_id: str) -> List[MemberRow]:
        def query(db: Session):
            members = db.query(SavingGroupMember).filter(
                SavingGroupMember.group_id == group_id
            ).order_by(SavingGroupMember.created_at.asc()).all()
            return [MemberRow.model_validate(m) for m in members]

        return self._run("list members", query)

    def list_entries(self, group_id: str) -> List[EntryRow]:
        def query(db: Session):
            entries = db.query(SavingGroupEntry).filter(
                SavingGroupEntry.group_id == group_id
            ).order_by(
                SavingGroupEntry.transaction_date.desc(),
                SavingGroupEntry.created_at.desc()
            ).all()
            return [EntryRow.model_validate(e) for e in entries]

        return self._run("list entries", query)

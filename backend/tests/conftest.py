"""Shared test fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from fastapi.testclient import TestClient
from datetime import date, datetime, timedelta
import uuid

from app.database import Base, build_session_factory
from app.dependencies import get_store
from app.main import app
from app.models import SavingGroup, SavingGroupMember, SavingGroupEntry, EntryType
from app.services.store import SavingsStore


@pytest.fixture(scope="function")
def engine(tmp_path):
    """Fresh file-backed SQLite database per test."""
    # File database so the parallel member/entry reads get their own connections
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def store(engine):
    return SavingsStore(build_session_factory(engine))


@pytest.fixture(scope="function")
def client(store):
    """Create a test client with the store override."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_group(db_session, name, target=100_000, created_at=None):
    group = SavingGroup(
        id=str(uuid.uuid4()),
        name=name,
        target_total_cents=target,
        created_at=created_at or datetime(2024, 1, 1),
    )
    db_session.add(group)
    db_session.commit()
    db_session.refresh(group)
    return group


def make_member(db_session, group, name, target=100_000, created_at=None):
    member = SavingGroupMember(
        id=str(uuid.uuid4()),
        group_id=group.id,
        display_name=name,
        target_amount_cents=target,
        created_at=created_at or datetime(2024, 1, 1),
    )
    db_session.add(member)
    db_session.commit()
    db_session.refresh(member)
    return member


def make_entry(db_session, member, amount, entry_type=EntryType.deposit, on=None, note=None, member_id=None):
    entry = SavingGroupEntry(
        id=str(uuid.uuid4()),
        group_id=member.group_id,
        member_id=member_id or member.id,
        transaction_date=on or date(2024, 1, 15),
        amount_cents=amount,
        type=entry_type,
        note=note,
    )
    db_session.add(entry)
    db_session.commit()
    db_session.refresh(entry)
    return entry


@pytest.fixture
def sample_group(db_session):
    """The preferred "Liburan" group."""
    return make_group(db_session, "Liburan", target=100_000)


@pytest.fixture
def sample_members(db_session, sample_group):
    """Two members, Andi created before Sari."""
    base = datetime(2024, 1, 1)
    andi = make_member(db_session, sample_group, "Andi", target=100_000, created_at=base)
    sari = make_member(db_session, sample_group, "Sari", target=50_000, created_at=base + timedelta(hours=1))
    return andi, sari


@pytest.fixture
def sample_entries(db_session, sample_members):
    """Andi: +40000 then -10000, Sari: +20000."""
    andi, sari = sample_members
    return [
        make_entry(db_session, andi, 40_000, on=date(2024, 1, 10), note="Gaji"),
        make_entry(db_session, andi, 10_000, EntryType.withdraw, on=date(2024, 2, 1)),
        make_entry(db_session, sari, 20_000, on=date(2024, 1, 20)),
    ]


@pytest.fixture
def add_group(db_session):
    """Factory for extra groups."""
    return lambda name, **kwargs: make_group(db_session, name, **kwargs)


@pytest.fixture
def add_member(db_session):
    """Factory for extra members."""
    return lambda group, name, **kwargs: make_member(db_session, group, name, **kwargs)


@pytest.fixture
def add_entry(db_session):
    """Factory for extra entries."""
    return lambda member, amount, *args, **kwargs: make_entry(db_session, member, amount, *args, **kwargs)

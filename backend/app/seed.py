"""
Seed script for a demo saving group.
"""

import uuid
from datetime import date, datetime, timedelta
from sqlalchemy.orm import Session

from app.config import settings
from app.database import Base, build_engine, build_session_factory
from app.models import SavingGroup, SavingGroupMember, SavingGroupEntry, EntryType


def seed_savings(db: Session) -> bool:
    """
    Seed the "Liburan" group with members and entries.
    Returns False if any group already exists.
    """
    existing_count = db.query(SavingGroup).count()
    if existing_count > 0:
        print(f"Saving groups already seeded ({existing_count} groups exist)")
        return False

    group = SavingGroup(
        id=str(uuid.uuid4()),
        name="Liburan",
        description="Target tabungan bersama untuk liburan",
        target_total_cents=1_500_000_000,
    )
    db.add(group)
    db.flush()

    # (display name, target in cents, entries as (days ago, amount, type, note))
    members_data = [
        ("Andi", 500_000_000, [
            (40, 150_000_000, EntryType.deposit, None),
            (12, 100_000_000, EntryType.deposit, "Bonus bulanan"),
        ]),
        ("Sari", 500_000_000, [
            (35, 200_000_000, EntryType.deposit, None),
            (5, 50_000_000, EntryType.withdraw, "Tiket kereta"),
        ]),
        ("Budi", 500_000_000, [
            (20, 75_000_000, EntryType.deposit, None),
        ]),
    ]

    base_time = datetime.utcnow()
    today = date.today()
    for i, (name, target, entries) in enumerate(members_data):
        member = SavingGroupMember(
            id=str(uuid.uuid4()),
            group_id=group.id,
            display_name=name,
            target_amount_cents=target,
            created_at=base_time + timedelta(seconds=i),
        )
        db.add(member)
        db.flush()

        for days_ago, amount, entry_type, note in entries:
            db.add(SavingGroupEntry(
                id=str(uuid.uuid4()),
                group_id=group.id,
                member_id=member.id,
                transaction_date=today - timedelta(days=days_ago),
                amount_cents=amount,
                type=entry_type,
                note=note,
            ))

    db.commit()
    print(f"Successfully seeded group '{group.name}' with {len(members_data)} members")
    return True


def main():
    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    db = build_session_factory(engine)()

    try:
        seed_savings(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()

"""create saving group tables

Revision ID: 001
Revises: 
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "saving_groups",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("target_total_cents", sa.Integer(), nullable=False),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_saving_groups_name", "saving_groups", ["name"])

    op.create_table(
        "saving_group_members",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("group_id", sa.String(36), sa.ForeignKey("saving_groups.id"), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("target_amount_cents", sa.Integer(), nullable=True),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_member_group_created", "saving_group_members", ["group_id", "created_at"])

    op.create_table(
        "saving_group_entries",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("group_id", sa.String(36), sa.ForeignKey("saving_groups.id"), nullable=False),
        sa.Column("member_id", sa.String(36), sa.ForeignKey("saving_group_members.id"), nullable=False),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("type", sa.Enum("deposit", "withdraw", name="entrytype"), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_entry_group_date", "saving_group_entries", ["group_id", "transaction_date"])
    op.create_index("idx_entry_member", "saving_group_entries", ["member_id"])


def downgrade() -> None:
    op.drop_table("saving_group_entries")
    op.drop_table("saving_group_members")
    op.drop_table("saving_groups")

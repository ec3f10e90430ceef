"""initial schema: users, disciplines, offers, participants, enrollment_requests, audit_logs

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None

REQUEST_STATE = sa.Enum("pending", "approved", "rejected", name="requeststate")

def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(160), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "disciplines",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(160), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_disciplines")),
    )
    op.create_index(op.f("ix_disciplines_name"), "disciplines", ["name"], unique=True)

    op.create_table(
        "offers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("discipline_id", sa.Integer(), nullable=False),
        sa.Column("label", sa.String(120), nullable=True),
        sa.Column("capacity_total", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("capacity_total >= 0", name=op.f("ck_offers_capacity_non_negative")),
        sa.ForeignKeyConstraint(["discipline_id"], ["disciplines.id"], name=op.f("fk_offers_discipline_id_disciplines")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_offers")),
    )
    op.create_index(op.f("ix_offers_discipline_id"), "offers", ["discipline_id"])

    op.create_table(
        "participants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(160), nullable=False),
        sa.Column("email", sa.String(160), nullable=False),
        sa.Column("photo_path", sa.String(255), nullable=True),
        sa.Column("employment_letter_path", sa.String(255), nullable=True),
        sa.Column("payment_proof_path", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_participants")),
    )
    op.create_index(op.f("ix_participants_email"), "participants", ["email"])

    op.create_table(
        "enrollment_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("participant_id", sa.Integer(), nullable=False),
        sa.Column("offer_id", sa.Integer(), nullable=False),
        sa.Column("state", REQUEST_STATE, nullable=False),
        sa.Column("rejection_reason", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("decided_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("decided_by_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["participant_id"], ["participants.id"],
                                name=op.f("fk_enrollment_requests_participant_id_participants")),
        sa.ForeignKeyConstraint(["offer_id"], ["offers.id"],
                                name=op.f("fk_enrollment_requests_offer_id_offers")),
        sa.ForeignKeyConstraint(["decided_by_id"], ["users.id"],
                                name=op.f("fk_enrollment_requests_decided_by_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_enrollment_requests")),
    )
    op.create_index(op.f("ix_enrollment_requests_participant_id"), "enrollment_requests", ["participant_id"])
    op.create_index(op.f("ix_enrollment_requests_offer_id"), "enrollment_requests", ["offer_id"])
    op.create_index(op.f("ix_enrollment_requests_state"), "enrollment_requests", ["state"])

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("entity", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=False),
        sa.Column("action", sa.String(30), nullable=False),
        sa.Column("diff_json", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name=op.f("fk_audit_logs_user_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_audit_logs")),
    )

def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_index(op.f("ix_enrollment_requests_state"), table_name="enrollment_requests")
    op.drop_index(op.f("ix_enrollment_requests_offer_id"), table_name="enrollment_requests")
    op.drop_index(op.f("ix_enrollment_requests_participant_id"), table_name="enrollment_requests")
    op.drop_table("enrollment_requests")
    REQUEST_STATE.drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_participants_email"), table_name="participants")
    op.drop_table("participants")
    op.drop_index(op.f("ix_offers_discipline_id"), table_name="offers")
    op.drop_table("offers")
    op.drop_index(op.f("ix_disciplines_name"), table_name="disciplines")
    op.drop_table("disciplines")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")

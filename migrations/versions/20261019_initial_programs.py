"""accounts, community programs and attendees

Revision ID: 20261019_initial
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_initial"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(80), nullable=False),
        sa.Column("full_name", sa.String(160), nullable=True),
        sa.Column("email", sa.String(160), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_accounts")),
    )
    op.create_index(op.f("ix_accounts_username"), "accounts", ["username"], unique=True)

    op.create_table(
        "community_programs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", sa.String(60), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("organizer", sa.String(160), nullable=True),
        sa.Column("location", sa.String(200), nullable=True),
        sa.Column("url", sa.String(255), nullable=True),
        sa.Column("image_url", sa.String(255), nullable=True),
        sa.Column("is_disabled", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_community_programs")),
    )

    op.create_table(
        "community_program_attendees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("program_id", sa.Integer(), nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("registration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.ForeignKeyConstraint(["program_id"], ["community_programs.id"], ondelete="CASCADE",
                                name=op.f("fk_community_program_attendees_program_id_community_programs")),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE",
                                name=op.f("fk_community_program_attendees_account_id_accounts")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_community_program_attendees")),
        # guarda de unicidade da matrícula (programa, conta)
        sa.UniqueConstraint("program_id", "account_id", name="uq_attendee_program_account"),
    )
    op.create_index(op.f("ix_community_program_attendees_program_id"), "community_program_attendees", ["program_id"])
    op.create_index(op.f("ix_community_program_attendees_account_id"), "community_program_attendees", ["account_id"])

def downgrade():
    op.drop_index(op.f("ix_community_program_attendees_account_id"), table_name="community_program_attendees")
    op.drop_index(op.f("ix_community_program_attendees_program_id"), table_name="community_program_attendees")
    op.drop_table("community_program_attendees")
    op.drop_table("community_programs")
    op.drop_index(op.f("ix_accounts_username"), table_name="accounts")
    op.drop_table("accounts")

"""create foster table

Revision ID: 0005_foster
Revises: 0004_clients
Create Date: 2024-09-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0005_foster"
down_revision = "0004_clients"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "foster",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("auth_users.id"), nullable=True),
        sa.Column("description", sa.String(length=100), nullable=True),
        sa.Column("pet_id", sa.Integer(), sa.ForeignKey("pets.id"), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_foster_user_id", "foster", ["user_id"])
    op.create_index("ix_foster_pet_id", "foster", ["pet_id"])
    op.execute(
        """
        ALTER TABLE foster
            ADD search_vector tsvector GENERATED ALWAYS AS (
                to_tsvector('simple', coalesce(description, ''))
            ) STORED
        """
    )
    op.create_index("ix_foster_search_vector", "foster", ["search_vector"], postgresql_using="gin")


def downgrade():
    op.drop_index("ix_foster_search_vector", table_name="foster")
    op.drop_index("ix_foster_pet_id", table_name="foster")
    op.drop_index("ix_foster_user_id", table_name="foster")
    op.drop_table("foster")

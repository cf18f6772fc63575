"""create clients table

Revision ID: 0004_clients
Revises: 0003_pets
Create Date: 2024-09-16
"""

from alembic import op
import sqlalchemy as sa

revision = "0004_clients"
down_revision = "0003_pets"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "clients",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("auth_users.id"), nullable=True),
        sa.Column("description", sa.String(length=100), nullable=True),
    )
    op.create_index("ix_clients_user_id", "clients", ["user_id"])
    op.execute(
        """
        ALTER TABLE clients
            ADD search_vector tsvector GENERATED ALWAYS AS (
                to_tsvector('simple', coalesce(user_id::text, '')) || ' ' ||
                to_tsvector('simple', coalesce(description, ''))
            ) STORED
        """
    )
    op.create_index("ix_clients_search_vector", "clients", ["search_vector"], postgresql_using="gin")


def downgrade():
    op.drop_index("ix_clients_search_vector", table_name="clients")
    op.drop_index("ix_clients_user_id", table_name="clients")
    op.drop_table("clients")

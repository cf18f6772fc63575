"""add generated search_vector to auth_users

Revision ID: 0002_auth_users_search
Revises: 0001_auth_users
Create Date: 2024-09-05
"""

from alembic import op

revision = "0002_auth_users_search"
down_revision = "0001_auth_users"
branch_labels = None
depends_on = None


def upgrade():
    op.execute(
        """
        ALTER TABLE auth_users
            ADD search_vector tsvector GENERATED ALWAYS AS (
                to_tsvector('simple', coalesce(email, '')) || ' ' ||
                to_tsvector('simple', coalesce(name, '')) || ' ' ||
                to_tsvector('simple', coalesce(address, '')) || ' ' ||
                to_tsvector('simple', coalesce(phone, ''))
            ) STORED
        """
    )
    op.create_index("ix_auth_users_search_vector", "auth_users", ["search_vector"], postgresql_using="gin")


def downgrade():
    op.drop_index("ix_auth_users_search_vector", table_name="auth_users")
    op.drop_column("auth_users", "search_vector")

"""create pets table

Revision ID: 0003_pets
Revises: 0002_auth_users_search
Create Date: 2024-09-11
"""

from alembic import op
import sqlalchemy as sa

revision = "0003_pets"
down_revision = "0002_auth_users_search"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "pets",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("species", sa.String(length=50), nullable=True),
        sa.Column("gender", sa.String(length=5), nullable=True),
        sa.Column("age", sa.REAL(), nullable=True),
        sa.Column("description", sa.String(length=100), nullable=True),
    )
    op.execute(
        """
        ALTER TABLE pets
            ADD search_vector tsvector GENERATED ALWAYS AS (
                to_tsvector('simple', coalesce(name, '')) || ' ' ||
                to_tsvector('simple', coalesce(species, '')) || ' ' ||
                to_tsvector('simple', coalesce(gender, '')) || ' ' ||
                to_tsvector('simple', coalesce(age::text, '')) || ' ' ||
                to_tsvector('simple', coalesce(description, ''))
            ) STORED
        """
    )
    op.create_index("ix_pets_search_vector", "pets", ["search_vector"], postgresql_using="gin")


def downgrade():
    op.drop_index("ix_pets_search_vector", table_name="pets")
    op.drop_table("pets")

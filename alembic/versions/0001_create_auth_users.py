"""create auth_users table

Revision ID: 0001_auth_users
Revises:
Create Date: 2024-08-21
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_auth_users"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "auth_users",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=50), nullable=False, unique=True),
        sa.Column("password", sa.String(length=256), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=True),
        sa.Column("address", sa.String(length=100), nullable=True),
        sa.Column("phone", sa.String(length=30), nullable=True),
    )


def downgrade():
    op.drop_table("auth_users")

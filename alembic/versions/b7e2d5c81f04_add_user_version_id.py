"""Add version counter to users

Revision ID: b7e2d5c81f04
Revises: 4f1c2a9b7d30
Create Date: 2026-10-20 14:03:17.551902

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7e2d5c81f04"
down_revision: str | None = "4f1c2a9b7d30"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Existing rows start at 1, matching what the ORM assigns on insert
    op.add_column(
        "users",
        sa.Column("version_id", sa.Integer(), server_default=sa.text("1"), nullable=False),
    )


def downgrade() -> None:
    op.drop_column("users", "version_id")

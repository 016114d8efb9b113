"""Create subscriptions table

Revision ID: 4c7e1f2a9b3d
Revises:
Create Date: 2025-10-20 09:12:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "4c7e1f2a9b3d"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the subscriptions table."""
    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("subscribed_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )


def downgrade() -> None:
    """Drop the subscriptions table."""
    op.drop_table("subscriptions")

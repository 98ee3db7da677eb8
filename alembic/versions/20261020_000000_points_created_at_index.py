"""index points by creation time

Revision ID: points_created_at_index
Revises: initial_schema
Create Date: 2026-10-20 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "points_created_at_index"
down_revision: Union[str, Sequence[str], None] = "initial_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Index points.created_at for ordered list queries."""
    op.create_index("idx_points_created_at", "points", ["created_at"], unique=False)


def downgrade() -> None:
    """Drop the points.created_at index."""
    op.drop_index("idx_points_created_at", table_name="points")

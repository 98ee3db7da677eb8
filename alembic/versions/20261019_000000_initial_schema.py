"""initial schema: maps and points

Revision ID: initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the maps and points tables."""
    op.create_table(
        "maps",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("map_name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("creator_name", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name="maps_pkey"),
    )
    op.create_index("idx_maps_created_at", "maps", ["created_at"], unique=False)
    op.create_index("idx_maps_creator", "maps", ["creator_name"], unique=False)

    op.create_table(
        "points",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("x", sa.Integer(), nullable=False),
        sa.Column("y", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("other_text", sa.Text(), nullable=True),
        sa.Column("creator_name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["map_id"], ["maps.id"], ondelete="CASCADE", name="points_map_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="points_pkey"),
    )
    op.create_index("idx_points_map", "points", ["map_id"], unique=False)
    op.create_index("idx_points_coordinates", "points", ["x", "y"], unique=False)
    op.create_index("idx_points_category", "points", ["category"], unique=False)


def downgrade() -> None:
    """Drop the points and maps tables."""
    op.drop_index("idx_points_category", table_name="points")
    op.drop_index("idx_points_coordinates", table_name="points")
    op.drop_index("idx_points_map", table_name="points")
    op.drop_table("points")
    op.drop_index("idx_maps_creator", table_name="maps")
    op.drop_index("idx_maps_created_at", table_name="maps")
    op.drop_table("maps")

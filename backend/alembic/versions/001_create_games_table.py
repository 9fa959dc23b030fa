"""Create games table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `games` table holding every Game record.
Rollback: downgrade() drops the table (all games are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the games table and its created_at index (list order)."""
    op.create_table(
        "games",
        sa.Column(
            "id",
            sa.String(32),
            nullable=False,
            comment="Unique game identifier (hex UUID)",
        ),
        sa.Column("title", sa.String(255), nullable=False, comment="Game title"),
        sa.Column("genre", sa.String(255), nullable=False, comment="Game genre"),
        sa.Column(
            "release_date",
            sa.String(255),
            nullable=True,
            comment="Release date as entered by the client",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this game was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_games_created_at", "games", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_games_created_at", table_name="games")
    op.drop_table("games")

"""
GameShelf Backend — Game SQLAlchemy Model
===========================================

What:  ORM model representing the `games` table.
Why:   Maps Game records to database rows for type-safe database operations.
Who:   Used by GameService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: 32-char hex string generated in Python (generate_game_id); immutable
    - title / genre: required, never empty (enforced by app.validation)
    - release_date: free-form text ("Jan 1 1985"), optional
    - created_at: insertion time; the list endpoint orders by it so records
      come back in the order they were created
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def generate_game_id() -> str:
    return uuid.uuid4().hex


class Game(Base):
    """
    A single video game record.

    Lifecycle:
        1. Created by POST /api/game/create
        2. Listed by GET /api/game/get
        3. title/genre/release_date changed by PUT /api/game/update
        4. Removed by DELETE /api/game/destroy/{id} (hard delete)
    """

    __tablename__ = "games"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_game_id,
        comment="Unique game identifier (hex UUID)",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Game title",
    )

    genre: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Game genre",
    )

    # Free-form: clients send strings like "Jan 1 1992", not ISO dates
    release_date: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Release date as entered by the client",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this game was created (UTC)",
    )

    __table_args__ = (
        Index("idx_games_created_at", created_at),
    )

    def __repr__(self) -> str:
        return f"<Game(id={self.id}, title='{self.title}', genre='{self.genre}')>"

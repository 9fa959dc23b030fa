"""
GameShelf Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock async session for service unit tests (no DB)
    ├── game_store:      Creates the games table, empties it after the test
    ├── seeded_game_id:  One stored game ("Super Mario"), returns its id
    └── test_client:     HTTPX AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports: app.config builds its singleton
# and app.database its engine at import time
_test_dir = tempfile.mkdtemp(prefix="gameshelf_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/games.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import delete

from app.database import async_session_factory, create_tables
from app.models.game import Game, generate_game_id


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_update_missing(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = None
            with pytest.raises(NotFoundError):
                await game_service.update_game(mock_db_session, {...})
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def game_store():
    """
    Real SQLite-backed store, emptied after every test.

    Tables are created on first use; each test ends by deleting every Game
    so no record leaks into the next one.
    """
    await create_tables()
    yield
    async with async_session_factory() as session:
        await session.execute(delete(Game))
        await session.commit()


@pytest_asyncio.fixture
async def seeded_game_id(game_store) -> str:
    """Stores the Super Mario game every API test starts with."""
    game = Game(
        id=generate_game_id(),
        title="Super Mario",
        genre="Classic",
        release_date="Jan 1 1985",
    )
    async with async_session_factory() as session:
        session.add(game)
        await session.commit()
    return game.id


@pytest_asyncio.fixture
async def test_client(game_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app, so the app's
    lifespan does not run; game_store creates the tables instead.
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def store_game():
    """
    Inserts a game straight into the store, bypassing the API; returns its id.
    Request it together with test_client or game_store so the table exists.
    """

    async def _store(title: str, genre: str, release_date: str = None) -> str:
        game = Game(id=generate_game_id(), title=title, genre=genre, release_date=release_date)
        async with async_session_factory() as session:
            session.add(game)
            await session.commit()
        return game.id

    return _store

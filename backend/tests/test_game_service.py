"""
GameShelf Backend — Game Service Unit Tests
=============================================

What:  Tests for GameService business logic with a mocked AsyncSession.
Why:   Validation, not-found handling and error wrapping can be checked
       without a database.

What we test:
    ✅ Missing fields are rejected before the database is touched
    ✅ Optional fields (releaseDate, genre on update) are handled
    ✅ Unknown id on update raises NotFoundError
    ✅ SQLAlchemy failures are wrapped in DatabaseError
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, GameValidationError, NotFoundError
from app.models.game import Game
from app.services.game_service import GameService


def _stored_game(**overrides):
    game = Game(
        id=overrides.get("id", "a" * 32),
        title=overrides.get("title", "Super Mario"),
        genre=overrides.get("genre", "Classic"),
        release_date=overrides.get("release_date", "Jan 1 1985"),
    )
    return game


class TestGameServiceCreate:

    def setup_method(self):
        self.service = GameService()

    @pytest.mark.asyncio
    async def test_create_success(self, mock_db_session):
        result = await self.service.create_game(
            mock_db_session,
            {"title": "Sonic the Hedgehog", "genre": "Classic", "releaseDate": "Jan 1 1992"},
        )

        assert result.title == "Sonic the Hedgehog"
        assert result.release_date == "Jan 1 1992"
        assert len(result.id) == 32
        mock_db_session.add.assert_called_once()
        mock_db_session.commit.assert_awaited_once()

        stored = mock_db_session.add.call_args.args[0]
        assert isinstance(stored, Game)
        assert stored.id == result.id

    @pytest.mark.asyncio
    async def test_create_missing_fields_skips_database(self, mock_db_session):
        with pytest.raises(GameValidationError) as exc_info:
            await self.service.create_game(mock_db_session, {"releaseDate": "Jan 1 1992"})

        assert exc_info.value.fields == ["title", "genre"]
        mock_db_session.add.assert_not_called()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_blank_release_date_stored_as_null(self, mock_db_session):
        result = await self.service.create_game(
            mock_db_session, {"title": "Tetris", "genre": "Puzzle", "releaseDate": ""}
        )

        assert result.release_date is None

    @pytest.mark.asyncio
    async def test_create_numeric_values_become_text(self, mock_db_session):
        result = await self.service.create_game(
            mock_db_session, {"title": 1942, "genre": "Shooter"}
        )

        assert result.title == "1942"

    @pytest.mark.asyncio
    async def test_create_object_value_skips_database(self, mock_db_session):
        with pytest.raises(GameValidationError) as exc_info:
            await self.service.create_game(
                mock_db_session, {"title": {"a": 1}, "genre": ["x"]}
            )

        assert exc_info.value.fields == ["title", "genre"]
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_database_failure(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("db down"))
        )

        with pytest.raises(DatabaseError):
            await self.service.create_game(
                mock_db_session, {"title": "Tetris", "genre": "Puzzle"}
            )


class TestGameServiceList:

    def setup_method(self):
        self.service = GameService()

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await self.service.list_games(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_with_results(self, mock_db_session):
        games = [
            _stored_game(id="1" * 32, title="Super Mario"),
            _stored_game(id="2" * 32, title="Metroid", release_date=None),
        ]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = games
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_games(mock_db_session)

        assert [g.title for g in result] == ["Super Mario", "Metroid"]
        assert result[1].release_date is None

    @pytest.mark.asyncio
    async def test_list_database_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(DatabaseError):
            await self.service.list_games(mock_db_session)


class TestGameServiceDelete:

    def setup_method(self):
        self.service = GameService()

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        result = await self.service.delete_game(mock_db_session, "a" * 32)

        assert result.acknowledged is True
        assert result.deleted_count == 1
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_unknown(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        result = await self.service.delete_game(mock_db_session, "missing")

        assert result.deleted_count == 0
        assert result.model_dump(by_alias=True) == {"acknowledged": True, "deletedCount": 0}


class TestGameServiceUpdate:

    def setup_method(self):
        self.service = GameService()

    def _returning(self, mock_db_session, game):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = game
        mock_db_session.execute.return_value = mock_result

    @pytest.mark.asyncio
    async def test_update_success(self, mock_db_session):
        game = _stored_game()
        self._returning(mock_db_session, game)

        result = await self.service.update_game(
            mock_db_session,
            {"id": game.id, "title": "Super Mario World", "genre": "Platformer"},
        )

        assert result.id == game.id
        assert result.title == "Super Mario World"
        assert result.genre == "Platformer"
        assert result.release_date == "Jan 1 1985"
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_without_genre_keeps_it(self, mock_db_session):
        game = _stored_game()
        self._returning(mock_db_session, game)

        result = await self.service.update_game(
            mock_db_session, {"id": game.id, "title": "Super Mario 64", "genre": None}
        )

        assert result.genre == "Classic"

    @pytest.mark.asyncio
    async def test_update_missing_fields(self, mock_db_session):
        with pytest.raises(GameValidationError) as exc_info:
            await self.service.update_game(mock_db_session, {"genre": "RPG"})

        assert exc_info.value.fields == ["id", "title"]
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_not_found(self, mock_db_session):
        self._returning(mock_db_session, None)

        with pytest.raises(NotFoundError):
            await self.service.update_game(mock_db_session, {"id": "nope", "title": "Ghost"})

        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_database_failure(self, mock_db_session):
        self._returning(mock_db_session, _stored_game())
        mock_db_session.commit = AsyncMock(side_effect=RuntimeError("deadlock"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.update_game(
                mock_db_session, {"id": "a" * 32, "title": "Super Mario"}
            )

        assert exc_info.value.context == {"game_id": "a" * 32}

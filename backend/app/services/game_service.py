"""
GameShelf Backend — Game Service (Business Logic)
===================================================

What:  Create, list, delete and update Game records.
Why:   Keeps validation and persistence out of the route handlers.
How:   Checks the payload against the rule tables in app.validation, then runs
       a single SQLAlchemy operation on the request's AsyncSession.
Who:   Called by the /api/game route handlers.

Error Handling Strategy:
    GameValidationError and NotFoundError propagate unchanged.
    Anything else raised by SQLAlchemy is logged with its stack trace and
    wrapped in DatabaseError (generic 500 for the client).

Design Decision:
    GameService is stateless; it receives the db session for each call.
    Mutations commit before returning so the response is only sent for
    data that is already durable.
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, GameShelfError, NotFoundError
from app.models.game import Game, generate_game_id
from app.schemas.game import DeleteResult, GameResponse
from app.validation import CREATE_RULES, UPDATE_RULES, is_missing, validate_required

logger = logging.getLogger(__name__)


def to_response(game: Game) -> GameResponse:
    return GameResponse(
        id=game.id,
        title=game.title,
        genre=game.genre,
        release_date=game.release_date,
    )


def _text(value: Any) -> str:
    # Only reached after validate_required: value is a str, int or float
    return value if isinstance(value, str) else str(value)


class GameService:
    """
    Business logic layer for game operations.

    Responsibilities:
        - create_game(): validate → insert → return the stored Game
        - list_games():  every Game in insertion order
        - delete_game(): remove by id, report how many rows went away
        - update_game(): validate → locate → modify → return the updated Game
    """

    async def create_game(
        self, db: AsyncSession, payload: Mapping[str, Any]
    ) -> GameResponse:
        """
        Persist a new Game.

        Args:
            db: Async database session (injected by FastAPI)
            payload: Request body; title and genre are required,
                     releaseDate is optional

        Raises:
            GameValidationError: title and/or genre missing (→ 422)
            DatabaseError: insert failed (→ 500)
        """
        validate_required(payload, CREATE_RULES)

        release_date = payload.get("releaseDate")
        game = Game(
            id=generate_game_id(),
            title=_text(payload["title"]),
            genre=_text(payload["genre"]),
            release_date=None if is_missing(release_date) else _text(release_date),
        )

        try:
            db.add(game)
            await db.commit()
        except Exception as e:
            logger.error("Database error creating game: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the game. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Game created: %s (%s)", game.id, game.title)
        return to_response(game)

    async def list_games(self, db: AsyncSession) -> List[GameResponse]:
        """
        Return every Game, oldest first.

        No pagination or filtering. Two calls with no mutation in between
        return the same records in the same order.
        """
        try:
            result = await db.execute(
                select(Game).order_by(asc(Game.created_at), asc(Game.id))
            )
            games = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing games: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve games. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [to_response(game) for game in games]

    async def delete_game(self, db: AsyncSession, game_id: str) -> DeleteResult:
        """
        Remove the Game with the given id.

        An unknown id is not an error: the result reports deletedCount=0.
        """
        try:
            result = await db.execute(delete(Game).where(Game.id == game_id))
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting game %s: %s", game_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the game. Please try again.",
                context={"game_id": game_id},
            )

        deleted = result.rowcount or 0
        if deleted:
            logger.info("Game deleted: %s", game_id)
        else:
            logger.info("Delete requested for unknown game: %s", game_id)
        return DeleteResult(acknowledged=True, deleted_count=deleted)

    async def update_game(
        self, db: AsyncSession, payload: Mapping[str, Any]
    ) -> GameResponse:
        """
        Modify an existing Game.

        `title` is always written. `genre` and `releaseDate` are written only
        when supplied with a non-blank value; otherwise the stored value stays.

        Raises:
            GameValidationError: id and/or title missing (→ 422)
            NotFoundError: no Game has that id (→ 404)
            DatabaseError: query or update failed (→ 500)
        """
        validate_required(payload, UPDATE_RULES)
        game_id = _text(payload["id"])

        try:
            result = await db.execute(select(Game).where(Game.id == game_id))
            game = result.scalar_one_or_none()

            if game is None:
                raise NotFoundError(resource="game", resource_id=game_id)

            game.title = _text(payload["title"])
            if not is_missing(payload.get("genre")):
                game.genre = _text(payload["genre"])
            if not is_missing(payload.get("releaseDate")):
                game.release_date = _text(payload["releaseDate"])

            await db.commit()

        except GameShelfError:
            raise
        except Exception as e:
            logger.error("Database error updating game %s: %s", game_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the game. Please try again.",
                context={"game_id": game_id},
            )

        logger.info("Game updated: %s (%s)", game.id, game.title)
        return to_response(game)


# ── Singleton Instance ────────────────────────────────────────────────────
game_service = GameService()

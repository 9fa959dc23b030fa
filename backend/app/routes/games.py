"""
GameShelf Backend — Game Route Handlers
=========================================

What:  The four /api/game endpoints (create, get, destroy, update).
How:   Extracts the path/body, delegates to GameService, returns JSON.

Route Inventory:
    POST   /api/game/create         → 200 Game, 422 missing title/genre
    GET    /api/game/get            → 200 Game[]
    DELETE /api/game/destroy/{id}   → 200 {acknowledged, deletedCount}
    PUT    /api/game/update         → 200 Game, 422 missing id/title, 404

Bodies are taken as any JSON value. A missing body or one that is not an
object carries no fields, so the required-field check, not FastAPI, produces
the 422 in the `errors` shape.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.game import (
    DeleteResult,
    ErrorResponse,
    GameResponse,
    ValidationErrorResponse,
)
from app.services.game_service import game_service
from app.validation import as_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/game", tags=["Games"])

_CREATE_EXAMPLE = {
    "title": "Sonic the Hedgehog",
    "genre": "Classic",
    "releaseDate": "Jan 1 1992",
}


@router.post(
    "/create",
    response_model=GameResponse,
    responses={
        200: {"description": "Game created", "model": GameResponse},
        422: {"description": "title and/or genre missing", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a game",
)
async def create_game(
    payload: Any = Body(default=None, examples=[_CREATE_EXAMPLE]),
    db: AsyncSession = Depends(get_db_session),
) -> GameResponse:
    return await game_service.create_game(db=db, payload=as_payload(payload))


@router.get(
    "/get",
    response_model=List[GameResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all games",
    description="Returns every stored game in creation order. No pagination.",
)
async def list_games(
    db: AsyncSession = Depends(get_db_session),
) -> List[GameResponse]:
    return await game_service.list_games(db=db)


@router.delete(
    "/destroy/{game_id}",
    response_model=DeleteResult,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a game by id",
    description=(
        "Always answers 200 for a well-formed request. deletedCount is 0 when "
        "no game had the given id."
    ),
)
async def destroy_game(
    game_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResult:
    return await game_service.delete_game(db=db, game_id=game_id)


@router.put(
    "/update",
    response_model=GameResponse,
    responses={
        200: {"description": "Updated game", "model": GameResponse},
        404: {"description": "No game with that id", "model": ErrorResponse},
        422: {"description": "id and/or title missing", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a game",
)
async def update_game(
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> GameResponse:
    """
    Update title (required) and, when given, genre / releaseDate of the game
    identified by `id` in the body.
    """
    return await game_service.update_game(db=db, payload=as_payload(payload))

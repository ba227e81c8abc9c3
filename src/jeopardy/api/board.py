"""Board endpoints: load a board and reveal its cells."""

import logging

from fastapi import APIRouter, HTTPException, status

from jeopardy.api.deps import GameDep
from jeopardy.schemas import BoardResponse, ErrorResponse, RevealResponse
from jeopardy.services.errors import (
    BoardNotReadyError,
    InvalidCellError,
    RunError,
    RunInProgressError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=BoardResponse)
async def get_board(game: GameDep):
    """Get the current board, with unrevealed cells showing the placeholder."""
    return BoardResponse.from_game(game)


@router.post(
    "/refresh",
    response_model=BoardResponse,
    responses={
        409: {"model": ErrorResponse, "description": "A board is already loading"},
        502: {"model": ErrorResponse, "description": "The trivia source could not fill a board"},
    },
)
async def refresh_board(game: GameDep):
    """Start a new game: sample categories, fetch their clues and replace the board.

    On failure the board is left empty and the error is reported; the page
    can retry by calling this endpoint again.
    """
    try:
        await game.start()
    except RunInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except RunError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not load a board: {e}",
        ) from e

    return BoardResponse.from_game(game)


@router.post(
    "/cells/{ref}/reveal",
    response_model=RevealResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No such cell"},
        409: {"model": ErrorResponse, "description": "No board is loaded"},
    },
)
async def reveal_cell(ref: str, game: GameDep):
    """Reveal the next stage of a cell.

    The first click shows the question, the second the answer; later clicks
    return ``changed: false``.
    """
    try:
        result = game.reveal_ref(ref)
    except BoardNotReadyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except InvalidCellError as e:
        logger.warning(f"Reveal requested for invalid cell {ref!r}: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return RevealResponse.from_result(result)

"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from jeopardy.services.game import GameController


def get_game(request: Request) -> GameController:
    """Get the game controller created at startup."""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Game is not initialized",
        )
    return game


# Type alias for the game controller dependency
GameDep = Annotated[GameController, Depends(get_game)]

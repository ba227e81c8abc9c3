"""Board data model."""

from jeopardy.models.board import BoardState, Category, Clue, RevealStage

__all__ = [
    "BoardState",
    "Category",
    "Clue",
    "RevealStage",
]

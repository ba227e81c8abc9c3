"""Pydantic schemas for API requests/responses."""

from jeopardy.schemas.board import (
    BoardResponse,
    CategoryColumnResponse,
    ClueCellResponse,
    RevealResponse,
)
from jeopardy.schemas.common import ErrorResponse

__all__ = [
    "BoardResponse",
    "CategoryColumnResponse",
    "ClueCellResponse",
    "ErrorResponse",
    "RevealResponse",
]

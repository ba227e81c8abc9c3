"""Board API schemas."""

from pydantic import BaseModel, Field

from jeopardy.models import RevealStage
from jeopardy.services.game import GameController
from jeopardy.services.render import render_board
from jeopardy.services.reveal import RevealResult


class ClueCellResponse(BaseModel):
    """One cell of the board."""

    id: str = Field(description="Cell id in '<category>-<clue>' form")
    showing: RevealStage
    text: str


class CategoryColumnResponse(BaseModel):
    """One column of the board."""

    title: str
    clues: list[ClueCellResponse]


class BoardResponse(BaseModel):
    """Current board as the page draws it."""

    loading: bool
    generation: int
    error: str | None = None
    categories: list[CategoryColumnResponse]

    @classmethod
    def from_game(cls, game: GameController) -> "BoardResponse":
        grid = render_board(game.board)
        return cls(
            loading=game.loading,
            generation=game.board.generation,
            error=str(game.last_error) if game.last_error else None,
            categories=[
                CategoryColumnResponse(
                    title=column.title,
                    clues=[
                        ClueCellResponse(id=cell.id, showing=cell.showing, text=cell.text)
                        for cell in column.cells
                    ],
                )
                for column in grid.columns
            ],
        )


class RevealResponse(BaseModel):
    """Result of clicking a cell."""

    id: str
    showing: RevealStage
    text: str | None
    changed: bool

    @classmethod
    def from_result(cls, result: RevealResult) -> "RevealResponse":
        return cls(
            id=result.cell_id,
            showing=result.showing,
            text=result.text,
            changed=result.changed,
        )

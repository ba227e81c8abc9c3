"""Build a display grid from board state.

Views (the HTML page, the terminal table) only ever draw a BoardGrid; they
never look at clue objects directly.
"""

from dataclasses import dataclass, field

from jeopardy.config import settings
from jeopardy.models import BoardState, Clue, RevealStage
from jeopardy.services.reveal import format_cell_ref


@dataclass
class GridCell:
    id: str
    showing: RevealStage
    text: str


@dataclass
class GridColumn:
    title: str
    cells: list[GridCell] = field(default_factory=list)


@dataclass
class BoardGrid:
    """Columns of cells, one column per category."""

    columns: list[GridColumn] = field(default_factory=list)

    @property
    def headers(self) -> list[str]:
        return [column.title for column in self.columns]

    @property
    def rows(self) -> list[list[GridCell]]:
        """Cells row by row (one row per clue position)."""
        if not self.columns:
            return []
        depth = max(len(column.cells) for column in self.columns)
        return [
            [column.cells[row] for column in self.columns if row < len(column.cells)]
            for row in range(depth)
        ]


def cell_text(clue: Clue, placeholder: str | None = None) -> str:
    """Text a cell shows for the clue's current stage."""
    if clue.showing is RevealStage.QUESTION:
        return clue.question
    if clue.showing is RevealStage.ANSWER:
        return clue.answer
    return settings.placeholder if placeholder is None else placeholder


def render_board(board: BoardState, placeholder: str | None = None) -> BoardGrid:
    columns = []
    for category_index, category in enumerate(board):
        cells = [
            GridCell(
                id=format_cell_ref(category_index, clue_index),
                showing=clue.showing,
                text=cell_text(clue, placeholder),
            )
            for clue_index, clue in enumerate(category.clues)
        ]
        columns.append(GridColumn(title=category.title, cells=cells))
    return BoardGrid(columns=columns)

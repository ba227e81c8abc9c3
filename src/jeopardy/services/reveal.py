"""Advance clues through their reveal stages."""

import re
from dataclasses import dataclass

from jeopardy.models import Clue, RevealStage
from jeopardy.services.errors import InvalidCellError

_CELL_REF_RE = re.compile(r"^(\d+)-(\d+)$")


@dataclass
class RevealResult:
    """Outcome of clicking a cell."""

    category_index: int
    clue_index: int
    showing: RevealStage
    text: str | None  # None when the click changed nothing
    changed: bool

    @property
    def cell_id(self) -> str:
        return format_cell_ref(self.category_index, self.clue_index)


def reveal_clue(clue: Clue) -> str | None:
    """Move a clue one stage forward and return the text to display.

    unrevealed -> question shows the question, question -> answer shows the
    answer. Once the answer is showing the clue no longer changes and None
    is returned.
    """
    next_stage = clue.showing.next()
    if next_stage is None:
        return None

    clue.showing = next_stage
    if next_stage is RevealStage.QUESTION:
        return clue.question
    return clue.answer


def format_cell_ref(category_index: int, clue_index: int) -> str:
    return f"{category_index}-{clue_index}"


def parse_cell_ref(ref: str) -> tuple[int, int]:
    """Parse a ``"<category>-<clue>"`` cell id into indices."""
    match = _CELL_REF_RE.match(ref.strip())
    if not match:
        raise InvalidCellError(f"Malformed cell reference: {ref!r}")
    return int(match.group(1)), int(match.group(2))

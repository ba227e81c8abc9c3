"""In-memory board state: categories, clues and their reveal stage."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class RevealStage(str, Enum):
    """How much of a clue is currently visible."""

    UNREVEALED = "unrevealed"
    QUESTION = "question"
    ANSWER = "answer"

    def next(self) -> "RevealStage | None":
        """Return the following stage, or None once the answer is showing."""
        if self is RevealStage.UNREVEALED:
            return RevealStage.QUESTION
        if self is RevealStage.QUESTION:
            return RevealStage.ANSWER
        return None


@dataclass
class Clue:
    """One question/answer pair."""

    question: str
    answer: str
    showing: RevealStage = RevealStage.UNREVEALED


@dataclass
class Category:
    """A titled column of clues."""

    id: int
    title: str
    clues: list[Clue] = field(default_factory=list)


class BoardState:
    """Categories of the current run.

    Owned by a single GameController. Categories are only ever replaced
    wholesale through populate(); individual clues change their ``showing``
    stage through the reveal controller.
    """

    def __init__(self) -> None:
        self._categories: list[Category] = []
        self.generation = 0

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def is_empty(self) -> bool:
        return not self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def clear(self) -> None:
        self._categories = []

    def populate(self, categories: list[Category]) -> None:
        """Replace the board with a freshly fetched set of categories."""
        self._categories = list(categories)
        self.generation += 1

    def clue_at(self, category_index: int, clue_index: int) -> Clue | None:
        """Look up a clue by position, or None when out of range.

        Negative indices are treated as out of range.
        """
        if not 0 <= category_index < len(self._categories):
            return None
        clues = self._categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            return None
        return clues[clue_index]

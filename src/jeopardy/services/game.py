"""Game lifecycle: build a board and reveal its clues."""

import asyncio
import logging
import random

from jeopardy.config import settings
from jeopardy.models import BoardState, Category
from jeopardy.services.clues import fetch_category
from jeopardy.services.errors import (
    BoardNotReadyError,
    InvalidCellError,
    RunError,
    RunInProgressError,
)
from jeopardy.services.events import (
    BoardRendered,
    CellRevealed,
    EventHub,
    Listener,
    LoadingChanged,
    RunFailed,
    Subscription,
)
from jeopardy.services.reveal import RevealResult, parse_cell_ref, reveal_clue
from jeopardy.services.sampler import load_category_pool, sample_category_ids
from jeopardy.services.trivia import TriviaClient

logger = logging.getLogger(__name__)


class GameController:
    """Owns one board and everything that changes it.

    start() is the only writer of the board's categories and reveal() the
    only writer of a clue's stage. Views learn about changes by subscribing.

    If a run fails, partial results are discarded: the board stays empty,
    the error is kept in ``last_error`` and published as RunFailed, loading
    is switched off and the exception is re-raised.
    """

    def __init__(
        self,
        client: TriviaClient,
        *,
        categories_per_board: int | None = None,
        clues_per_category: int | None = None,
        category_pool_size: int | None = None,
        fetch_concurrently: bool | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client
        self.categories_per_board = categories_per_board or settings.categories_per_board
        self.clues_per_category = clues_per_category or settings.clues_per_category
        self.category_pool_size = category_pool_size or settings.category_pool_size
        self.fetch_concurrently = (
            settings.fetch_concurrently if fetch_concurrently is None else fetch_concurrently
        )
        self.rng = rng or random.Random()

        self.board = BoardState()
        self.last_error: Exception | None = None
        self._loading = False
        self._events = EventHub()

    @property
    def loading(self) -> bool:
        return self._loading

    def subscribe(self, listener: Listener) -> Subscription:
        """Register a listener for game events."""
        return self._events.subscribe(listener)

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        self._events.publish(LoadingChanged(loading=loading))

    async def start(self) -> BoardState:
        """Run one sample-fetch-render cycle.

        Raises:
            RunInProgressError: If a run is already loading
            RunError: If sampling or any category fetch fails
        """
        if self._loading:
            raise RunInProgressError("A board is already loading")

        self.last_error = None
        self.board.clear()
        self._set_loading(True)

        try:
            pool = await load_category_pool(self.client, self.category_pool_size)
            category_ids = sample_category_ids(pool, self.categories_per_board, rng=self.rng)
            logger.info(f"Starting run with categories {category_ids}")

            categories = await self._fetch_categories(category_ids)

            self.board.populate(categories)
            logger.info(
                f"Board {self.board.generation} ready: "
                f"{len(categories)} categories x {self.clues_per_category} clues"
            )
            self._events.publish(BoardRendered(board=self.board))
            return self.board
        except RunError as e:
            self.last_error = e
            logger.error(f"Run failed: {e}")
            self._events.publish(RunFailed(error=e))
            raise
        finally:
            self._set_loading(False)

    async def _fetch_one(self, category_id: int) -> Category:
        return await fetch_category(
            self.client, category_id, self.clues_per_category, rng=self.rng
        )

    async def _fetch_categories(self, category_ids: list[int]) -> list[Category]:
        """Fetch categories, keeping sampler order in both modes."""
        if not self.fetch_concurrently:
            categories = []
            for category_id in category_ids:
                categories.append(await self._fetch_one(category_id))
            return categories

        tasks = [asyncio.ensure_future(self._fetch_one(category_id)) for category_id in category_ids]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    def reveal(self, category_index: int, clue_index: int) -> RevealResult:
        """Handle a click on a cell.

        Raises:
            BoardNotReadyError: If no board is loaded
            InvalidCellError: If the indices are outside the board
        """
        if self.board.is_empty:
            raise BoardNotReadyError("No board is loaded")

        clue = self.board.clue_at(category_index, clue_index)
        if clue is None:
            raise InvalidCellError(
                f"No clue at category {category_index}, clue {clue_index} "
                f"(board is {len(self.board)} x {self.clues_per_category})"
            )

        text = reveal_clue(clue)
        result = RevealResult(
            category_index=category_index,
            clue_index=clue_index,
            showing=clue.showing,
            text=text,
            changed=text is not None,
        )
        if text is not None:
            self._events.publish(
                CellRevealed(
                    category_index=category_index,
                    clue_index=clue_index,
                    stage=clue.showing,
                    text=text,
                )
            )
        return result

    def reveal_ref(self, ref: str) -> RevealResult:
        """Handle a click on a cell given its ``"<category>-<clue>"`` id."""
        category_index, clue_index = parse_cell_ref(ref)
        return self.reveal(category_index, clue_index)

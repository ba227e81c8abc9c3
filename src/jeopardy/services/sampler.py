"""Random selection of categories for a board."""

import logging
import random
from collections.abc import Iterable

from jeopardy.services.errors import InsufficientPoolError
from jeopardy.services.trivia import TriviaClient

logger = logging.getLogger(__name__)


def sample_category_ids(
    pool: Iterable[int],
    count: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Pick ``count`` distinct category ids uniformly at random.

    Duplicate ids in the pool count once.

    Raises:
        ValueError: If count is not positive
        InsufficientPoolError: If the pool has fewer distinct ids than count
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    distinct = list(dict.fromkeys(pool))
    if len(distinct) < count:
        raise InsufficientPoolError(available=len(distinct), requested=count)

    return (rng or random).sample(distinct, count)


async def load_category_pool(client: TriviaClient, pool_size: int) -> list[int]:
    """Fetch the ids of ``pool_size`` categories to sample from."""
    categories = await client.list_categories(count=pool_size)
    logger.debug(f"Loaded category pool of {len(categories)} (requested {pool_size})")
    return [category.id for category in categories]

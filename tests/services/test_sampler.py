"""Category sampler tests."""

import random

import pytest

from jeopardy.services.errors import InsufficientPoolError, RunError
from jeopardy.services.sampler import load_category_pool, sample_category_ids


def test_sample_returns_requested_count_of_distinct_ids():
    pool = [1, 2, 3, 4, 5, 6, 7, 8]

    ids = sample_category_ids(pool, 6)

    assert len(ids) == 6
    assert len(set(ids)) == 6
    assert set(ids) <= set(pool)


@pytest.mark.parametrize("seed", range(20))
def test_sample_never_repeats_ids(seed):
    pool = list(range(100, 130))

    ids = sample_category_ids(pool, 6, rng=random.Random(seed))

    assert len(set(ids)) == 6
    assert all(i in pool for i in ids)


def test_sample_whole_pool():
    ids = sample_category_ids([3, 1, 2], 3, rng=random.Random(0))
    assert sorted(ids) == [1, 2, 3]


def test_sample_collapses_duplicate_pool_entries():
    ids = sample_category_ids([1, 1, 2, 2, 3, 3], 3, rng=random.Random(0))
    assert sorted(ids) == [1, 2, 3]


def test_sample_pool_too_small():
    with pytest.raises(InsufficientPoolError) as exc_info:
        sample_category_ids([1, 2, 3], 6)

    assert exc_info.value.available == 3
    assert exc_info.value.requested == 6
    assert isinstance(exc_info.value, RunError)


def test_sample_duplicates_do_not_count_toward_pool_size():
    with pytest.raises(InsufficientPoolError):
        sample_category_ids([1, 1, 1, 1, 1, 1], 2)


@pytest.mark.parametrize("count", [0, -1])
def test_sample_rejects_non_positive_count(count):
    with pytest.raises(ValueError):
        sample_category_ids([1, 2, 3], count)


def test_sample_is_reproducible_with_seeded_rng():
    pool = list(range(50))
    assert sample_category_ids(pool, 6, rng=random.Random(42)) == sample_category_ids(
        pool, 6, rng=random.Random(42)
    )


@pytest.mark.asyncio
async def test_load_category_pool(trivia_client, trivia_source):
    pool = await load_category_pool(trivia_client, 100)

    assert pool == [1, 2, 3, 4, 5, 6, 7, 8]
    assert trivia_source.requests[0].url.params["count"] == "100"

"""Pytest configuration and fixtures."""

import os
import random
from collections.abc import AsyncGenerator
from typing import Any

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from jeopardy.api.deps import get_game
from jeopardy.main import app
from jeopardy.services.game import GameController
from jeopardy.services.trivia import TriviaClient

TRIVIA_BASE_URL = "http://trivia.test/api/"


def make_clues(category_id: int, count: int) -> list[dict[str, Any]]:
    """Build ``count`` distinct raw clues for a category."""
    return [
        {
            "id": category_id * 100 + n,
            "question": f"Question {n} of category {category_id}",
            "answer": f"Answer {n} of category {category_id}",
            "value": (n + 1) * 200,
            "category_id": category_id,
        }
        for n in range(count)
    ]


class FakeTriviaSource:
    """In-memory jService stand-in served through httpx.MockTransport.

    Usage:
        source = FakeTriviaSource()
        source.add_category(1, "Math", [{"question": "2+2", "answer": "4"}])
        client = source.client()
    """

    def __init__(self) -> None:
        self.categories: dict[int, dict[str, Any]] = {}
        self.status_overrides: dict[int, int] = {}
        self.requests: list[httpx.Request] = []

    def add_category(self, category_id: int, title: str, clues: list[dict[str, Any]]) -> None:
        self.categories[category_id] = {"id": category_id, "title": title, "clues": clues}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rstrip("/").rsplit("/", 1)[-1]

        if endpoint == "categories":
            count = int(request.url.params.get("count", "1"))
            offset = int(request.url.params.get("offset", "0"))
            listing = [
                {"id": c["id"], "title": c["title"], "clues_count": len(c["clues"])}
                for c in self.categories.values()
            ]
            return httpx.Response(200, json=listing[offset : offset + count])

        if endpoint == "category":
            category_id = int(request.url.params["id"])
            if category_id in self.status_overrides:
                return httpx.Response(self.status_overrides[category_id], json={"error": "failed"})
            category = self.categories.get(category_id)
            if category is None:
                return httpx.Response(404, json={"error": "Category not found"})
            return httpx.Response(200, json={**category, "clues_count": len(category["clues"])})

        return httpx.Response(404, json={"error": "Unknown endpoint"})

    def category_requests(self) -> list[int]:
        """Ids of categories fetched so far, in request order."""
        return [
            int(r.url.params["id"])
            for r in self.requests
            if r.url.path.endswith("/category")
        ]

    def client(self) -> TriviaClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return TriviaClient(base_url=TRIVIA_BASE_URL, timeout=5.0, http_client=http_client)


@pytest.fixture
def trivia_source() -> FakeTriviaSource:
    """A source with 8 categories of 10 clues each."""
    source = FakeTriviaSource()
    for category_id in range(1, 9):
        source.add_category(category_id, f"Category {category_id}", make_clues(category_id, 10))
    return source


@pytest.fixture
async def trivia_client(trivia_source: FakeTriviaSource) -> AsyncGenerator[TriviaClient, None]:
    """Trivia client talking to the fake source."""
    client = trivia_source.client()
    yield client
    await client._get_client().aclose()


@pytest.fixture
def game(trivia_client: TriviaClient) -> GameController:
    """Game controller with a 6 x 5 board and a seeded RNG."""
    return GameController(
        trivia_client,
        categories_per_board=6,
        clues_per_category=5,
        category_pool_size=100,
        fetch_concurrently=False,
        rng=random.Random(1234),
    )


@pytest.fixture
async def client(game: GameController) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client wired to the test game."""
    app.dependency_overrides[get_game] = lambda: game

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

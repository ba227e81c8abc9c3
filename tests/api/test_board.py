"""Board API endpoint tests."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from jeopardy.main import app
from jeopardy.services.errors import InsufficientPoolError
from jeopardy.services.game import GameController


@pytest.mark.asyncio
async def test_board_empty_before_start(client: AsyncClient):
    """Test that the board is empty until a game is started."""
    response = await client.get("/api/board")
    assert response.status_code == 200
    data = response.json()
    assert data["categories"] == []
    assert data["loading"] is False
    assert data["generation"] == 0
    assert data["error"] is None


@pytest.mark.asyncio
async def test_refresh_builds_board(client: AsyncClient):
    """Test that refreshing loads a full board of placeholders."""
    response = await client.post("/api/board/refresh")
    assert response.status_code == 200
    data = response.json()
    assert data["generation"] == 1
    assert len(data["categories"]) == 6
    for category_index, category in enumerate(data["categories"]):
        assert category["title"].startswith("Category ")
        assert len(category["clues"]) == 5
        for clue_index, cell in enumerate(category["clues"]):
            assert cell["id"] == f"{category_index}-{clue_index}"
            assert cell["showing"] == "unrevealed"
            assert cell["text"] == "?"

    response = await client.get("/api/board")
    assert response.json() == data


@pytest.mark.asyncio
async def test_reveal_sequence(client: AsyncClient, game: GameController):
    """Test that clicks show the question, then the answer, then nothing."""
    await client.post("/api/board/refresh")
    clue = game.board.categories[1].clues[2]

    response = await client.post("/api/board/cells/1-2/reveal")
    assert response.status_code == 200
    assert response.json() == {
        "id": "1-2",
        "showing": "question",
        "text": clue.question,
        "changed": True,
    }

    response = await client.post("/api/board/cells/1-2/reveal")
    assert response.json()["text"] == clue.answer
    assert response.json()["showing"] == "answer"

    response = await client.post("/api/board/cells/1-2/reveal")
    assert response.json() == {"id": "1-2", "showing": "answer", "text": None, "changed": False}

    board = (await client.get("/api/board")).json()
    assert board["categories"][1]["clues"][2]["text"] == clue.answer
    assert board["categories"][1]["clues"][2]["showing"] == "answer"
    assert board["categories"][0]["clues"][0]["text"] == "?"


@pytest.mark.asyncio
@pytest.mark.parametrize("ref", ["6-0", "0-5", "99-99", "x-y", "1"])
async def test_reveal_invalid_cell(client: AsyncClient, ref: str):
    """Test that cells outside the board are rejected."""
    await client.post("/api/board/refresh")

    response = await client.post(f"/api/board/cells/{ref}/reveal")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_reveal_without_board(client: AsyncClient):
    """Test revealing before any board is loaded."""
    response = await client.post("/api/board/cells/0-0/reveal")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_refresh_failure_reports_error(client: AsyncClient, trivia_source):
    """Test that a failed run returns 502 and leaves an empty board."""
    trivia_source.status_overrides = {category_id: 500 for category_id in range(1, 9)}

    response = await client.post("/api/board/refresh")
    assert response.status_code == 502
    assert "Could not load a board" in response.json()["detail"]

    data = (await client.get("/api/board")).json()
    assert data["categories"] == []
    assert data["loading"] is False
    assert "500" in data["error"]


@pytest.mark.asyncio
async def test_refresh_pool_too_small(client: AsyncClient):
    """Test that an undersized category pool fails the run."""
    with patch("jeopardy.services.game.load_category_pool", new_callable=AsyncMock) as mock_pool:
        mock_pool.return_value = [1, 2, 3]

        response = await client.post("/api/board/refresh")

    assert response.status_code == 502
    assert "3 categories, 6 requested" in response.json()["detail"]


@pytest.mark.asyncio
async def test_refresh_while_loading(client: AsyncClient, game: GameController):
    """Test that a second refresh is rejected while one is in flight."""
    gate = asyncio.Event()

    async def slow_pool(client, pool_size):
        await gate.wait()
        raise InsufficientPoolError(available=0, requested=6)

    with patch("jeopardy.services.game.load_category_pool", new_callable=AsyncMock) as mock_pool:
        mock_pool.side_effect = slow_pool

        task = asyncio.create_task(game.start())
        await asyncio.sleep(0)

        response = await client.post("/api/board/refresh")
        assert response.status_code == 409

        board = (await client.get("/api/board")).json()
        assert board["loading"] is True

        gate.set()
        with pytest.raises(InsufficientPoolError):
            await task


@pytest.mark.asyncio
async def test_game_not_initialized():
    """Test that the API reports 503 when startup has not created a game."""
    from httpx import ASGITransport

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/board")

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_index_page(client: AsyncClient):
    """Test that the board page is served."""
    response = await client.get("/")
    assert response.status_code == 200
    assert 'id="jeopardy"' in response.text

    response = await client.get("/static/board.js")
    assert response.status_code == 200

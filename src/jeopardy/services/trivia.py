"""Client for jService-compatible trivia APIs."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from jeopardy.config import settings
from jeopardy.services.errors import CategoryUnavailableError, TriviaSourceError

logger = logging.getLogger(__name__)

TRIVIA_USER_AGENT = "JeopardyBoard/0.1"

# Shared httpx client headers
TRIVIA_HEADERS = {"User-Agent": TRIVIA_USER_AGENT, "Accept": "application/json"}


@dataclass
class TriviaCategorySummary:
    """Category listing entry."""

    id: int
    title: str
    clues_count: int | None = None


@dataclass
class TriviaClue:
    """Raw clue as returned by the API."""

    question: str
    answer: str
    value: int | None = None


@dataclass
class TriviaCategoryDetail:
    """Category with its full clue set."""

    id: int
    title: str
    clues: list[TriviaClue] = field(default_factory=list)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_summary(item: Any) -> TriviaCategorySummary | None:
    if not isinstance(item, dict) or item.get("id") is None:
        return None
    try:
        category_id = int(item["id"])
    except (TypeError, ValueError):
        return None
    clues_count = item.get("clues_count")
    return TriviaCategorySummary(
        id=category_id,
        title=_as_text(item.get("title")),
        clues_count=int(clues_count) if isinstance(clues_count, int) else None,
    )


def _parse_clue(item: Any) -> TriviaClue | None:
    if not isinstance(item, dict):
        return None
    value = item.get("value")
    return TriviaClue(
        question=_as_text(item.get("question")),
        answer=_as_text(item.get("answer")),
        value=value if isinstance(value, int) else None,
    )


class TriviaClient:
    """Read-only access to a trivia API.

    Usage:
        async with TriviaClient() as client:
            categories = await client.list_categories(count=100)
            detail = await client.get_category(categories[0].id)

    An ``http_client`` may be passed in (tests use one built on
    ``httpx.MockTransport``); it is then left open on close().
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.trivia_api_url).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "TriviaClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get the HTTP client, lazily initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(headers=TRIVIA_HEADERS, timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} {params}")

        try:
            response = await self._get_client().get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TriviaSourceError(f"Trivia API request to {path} timed out") from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404 and path == "category":
                raise CategoryUnavailableError(params["id"], "not found") from e
            raise TriviaSourceError(
                f"Trivia API returned {e.response.status_code} for {path}"
            ) from e
        except httpx.HTTPError as e:
            raise TriviaSourceError(f"Trivia API request to {path} failed: {e!r}") from e

        try:
            return response.json()
        except ValueError as e:
            raise TriviaSourceError(f"Trivia API returned invalid JSON for {path}") from e

    async def list_categories(self, count: int, offset: int = 0) -> list[TriviaCategorySummary]:
        """List categories available on the source.

        Args:
            count: Number of categories to request
            offset: Offset into the source's category list

        Returns:
            Categories in the order the source returned them

        Raises:
            TriviaSourceError: On transport errors or a malformed payload
        """
        data = await self._get_json("categories", {"count": count, "offset": offset})
        if not isinstance(data, list):
            raise TriviaSourceError("Trivia API returned a non-list category listing")

        results = []
        for item in data:
            summary = _parse_summary(item)
            if summary is None:
                logger.debug(f"Skipping malformed category entry: {item!r}")
                continue
            results.append(summary)
        return results

    async def get_category(self, category_id: int) -> TriviaCategoryDetail:
        """Fetch one category with all of its clues.

        Raises:
            CategoryUnavailableError: If the source does not know the category
            TriviaSourceError: On transport errors or a malformed payload
        """
        data = await self._get_json("category", {"id": category_id})
        if not isinstance(data, dict):
            raise TriviaSourceError(f"Trivia API returned a malformed category {category_id}")

        raw_clues = data.get("clues") or []
        if not isinstance(raw_clues, list):
            raise TriviaSourceError(f"Trivia API returned malformed clues for category {category_id}")

        clues = [clue for clue in (_parse_clue(item) for item in raw_clues) if clue is not None]
        return TriviaCategoryDetail(
            id=category_id,
            title=_as_text(data.get("title")),
            clues=clues,
        )

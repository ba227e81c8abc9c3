"""Turn a remote category into a column of playable clues."""

import html
import logging
import random
import re

from jeopardy.models import Category, Clue, RevealStage
from jeopardy.services.errors import CategoryUnavailableError, InsufficientCluesError
from jeopardy.services.trivia import TriviaClient, TriviaClue

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Strip markup and entities the source embeds in clue text."""
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)
    text = text.replace("\\'", "'").replace('\\"', '"')
    return _SPACE_RE.sub(" ", text).strip()


def _playable(clue: TriviaClue) -> Clue | None:
    question = normalize_text(clue.question)
    answer = normalize_text(clue.answer)
    if not question or not answer:
        return None
    return Clue(question=question, answer=answer, showing=RevealStage.UNREVEALED)


async def fetch_category(
    client: TriviaClient,
    category_id: int,
    clues_per_category: int,
    rng: random.Random | None = None,
) -> Category:
    """Fetch a category and sample ``clues_per_category`` of its clues.

    Clues with a blank question or answer are dropped before sampling.

    Raises:
        CategoryUnavailableError: If the source returns no clues
        InsufficientCluesError: If fewer usable clues than required remain
        TriviaSourceError: On transport or payload errors
    """
    detail = await client.get_category(category_id)
    if not detail.clues:
        raise CategoryUnavailableError(category_id)

    usable = [clue for clue in (_playable(c) for c in detail.clues) if clue is not None]
    if len(usable) < clues_per_category:
        raise InsufficientCluesError(category_id, available=len(usable), required=clues_per_category)

    if len(usable) != len(detail.clues):
        logger.debug(f"Category {category_id}: dropped {len(detail.clues) - len(usable)} blank clues")

    sampled = (rng or random).sample(usable, clues_per_category)
    return Category(id=category_id, title=normalize_text(detail.title), clues=sampled)

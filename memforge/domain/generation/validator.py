import logging
from typing import Any, List

from memforge.core.error_handling import capture_errors
from memforge.core.exceptions.domain import EmptyResultError
from memforge.domain.deck.models import Card, FlashcardBatch

logger = logging.getLogger(__name__)


def is_valid_candidate(candidate: Any) -> bool:
    if not isinstance(candidate, dict):
        return False
    front, back = candidate.get("front"), candidate.get("back")
    return isinstance(front, str) and isinstance(back, str) and bool(front.strip()) and bool(back.strip())


@capture_errors
def validate_candidates(candidates: List[Any]) -> FlashcardBatch:
    """
    Keep well-formed front/back pairs in their original order.

    Raises:
        EmptyResultError: If no candidate survives filtering
    """
    cards = [Card(front=c["front"], back=c["back"]) for c in candidates if is_valid_candidate(c)]
    discarded = len(candidates) - len(cards)

    if not cards:
        raise EmptyResultError(len(candidates))

    if discarded:
        logger.info(f"Discarded {discarded} malformed flashcard candidates")
    return FlashcardBatch(cards=cards, discarded=discarded)

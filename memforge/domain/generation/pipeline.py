import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from memforge.core.error_handling import capture_errors
from memforge.core.result import StageResult
from memforge.domain.deck.models import FlashcardBatch

from .normalizer import normalize_text
from .prompts import build_prompt
from .sanitizer import sanitize_response
from .validator import validate_candidates

if TYPE_CHECKING:
    from memforge.domain.gateway.base import GenerationGateway

logger = logging.getLogger(__name__)


class FlashcardPipeline:
    """
    Turns study text into a validated, unsaved batch of flashcards.

    Stages run in order: normalize, build prompt, generate, sanitize, validate.
    Each stage returns a StageResult and the first failure stops the run, so
    an empty input never reaches the gateway.
    """

    def __init__(self, gateway: "GenerationGateway", max_input_length: Optional[int] = None):
        self.gateway = gateway
        self.max_input_length = max_input_length
        self._generate = capture_errors(gateway.generate)

    def _normalize(self, text: Any) -> StageResult[str]:
        return normalize_text(text, max_length=self.max_input_length)

    @property
    def stages(self) -> List[Callable[[Any], Any]]:
        return [self._normalize, build_prompt, self._generate, sanitize_response, validate_candidates]

    async def run(self, text: Any) -> StageResult[FlashcardBatch]:
        if isinstance(text, str):
            logger.info(f"Generating flashcards for text: {text[:100]}...")

        result: StageResult = StageResult.success(text)
        for stage in self.stages:
            result = stage(result.value)
            if inspect.isawaitable(result):
                result = await result
            if not result.ok:
                return result

        logger.info(f"Generated {result.value.count} flashcards")
        return result

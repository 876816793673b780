import logging

from fastapi import APIRouter, Depends

from memforge.api.models.requests import GenerateFlashcardsRequest
from memforge.api.models.responses import CardModel, GenerateFlashcardsResponse
from memforge.core.config import Settings
from memforge.core.container import get_gateway, get_settings
from memforge.core.error_handling import handle_exceptions
from memforge.core.exceptions.base import ConfigurationError, ExternalServiceError, ValidationError
from memforge.core.exceptions.domain import EmptyResultError, ParseError
from memforge.domain.gateway.base import GenerationGateway
from memforge.domain.generation.pipeline import FlashcardPipeline

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/generate-flashcards", response_model=GenerateFlashcardsResponse)
@handle_exceptions(
    {
        ValidationError: (400, "Invalid study text"),
        ConfigurationError: (500, "Flashcard generation is not configured"),
        ExternalServiceError: (502, "Failed to generate flashcards"),
        ParseError: (500, "Failed to parse AI response"),
        EmptyResultError: (500, "No valid flashcards could be generated"),
    }
)
async def generate_flashcards(
    request: GenerateFlashcardsRequest,
    gateway: GenerationGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> GenerateFlashcardsResponse:
    """
    Generate flashcards from study text.

    The cards are returned unsaved; callers persist them with ``POST /decks``.
    """
    pipeline = FlashcardPipeline(gateway, max_input_length=settings.max_input_length)
    batch = (await pipeline.run(request.text)).unwrap()

    return GenerateFlashcardsResponse(
        flashcards=[CardModel(front=card.front, back=card.back) for card in batch.cards],
        count=batch.count,
    )

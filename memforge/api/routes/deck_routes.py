import logging
from typing import List

from fastapi import APIRouter, Depends

from memforge.api.models.requests import DeckRequest
from memforge.api.models.responses import DeckResponse, MessageResponse
from memforge.core.container import get_deck_repository
from memforge.core.error_handling import handle_exceptions
from memforge.core.exceptions.base import NotFoundError, ValidationError
from memforge.core.exceptions.domain import StorageError
from memforge.repositories.deck_repository import DeckRepositoryInterface

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=List[DeckResponse])
@handle_exceptions({StorageError: (500, "Failed to fetch decks")})
async def list_decks(repository: DeckRepositoryInterface = Depends(get_deck_repository)) -> List[DeckResponse]:
    """List all decks, newest first."""
    return [DeckResponse.from_deck(deck) for deck in await repository.list()]


@router.get("/{deck_id}", response_model=DeckResponse)
@handle_exceptions({NotFoundError: (404, "Deck not found"), StorageError: (500, "Failed to fetch deck")})
async def get_deck(deck_id: str, repository: DeckRepositoryInterface = Depends(get_deck_repository)) -> DeckResponse:
    return DeckResponse.from_deck(await repository.get(deck_id))


@router.post("", response_model=DeckResponse, status_code=201)
@handle_exceptions({ValidationError: (400, "Invalid deck"), StorageError: (500, "Failed to create deck")})
async def create_deck(
    request: DeckRequest, repository: DeckRepositoryInterface = Depends(get_deck_repository)
) -> DeckResponse:
    """
    Save a named deck.

    Args:
        request (DeckRequest): Deck name and cards
        repository (DeckRepositoryInterface): Deck repository instance

    Returns:
        DeckResponse: The persisted deck with its id and timestamps
    """
    return DeckResponse.from_deck(await repository.create(request.name, request.cards))


@router.put("/{deck_id}", response_model=DeckResponse)
@handle_exceptions(
    {
        ValidationError: (400, "Invalid deck"),
        NotFoundError: (404, "Deck not found"),
        StorageError: (500, "Failed to update deck"),
    }
)
async def update_deck(
    deck_id: str, request: DeckRequest, repository: DeckRepositoryInterface = Depends(get_deck_repository)
) -> DeckResponse:
    """Replace the name and cards of a deck."""
    return DeckResponse.from_deck(await repository.update(deck_id, request.name, request.cards))


@router.delete("/{deck_id}", response_model=MessageResponse)
@handle_exceptions({NotFoundError: (404, "Deck not found"), StorageError: (500, "Failed to delete deck")})
async def delete_deck(
    deck_id: str, repository: DeckRepositoryInterface = Depends(get_deck_repository)
) -> MessageResponse:
    await repository.delete(deck_id)
    return MessageResponse(message="Deck deleted successfully")

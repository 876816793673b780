from .domain.generation.pipeline import FlashcardPipeline
from .repositories.deck_repository import DeckRepositoryInterface, StorageDeckRepository

__all__ = ['FlashcardPipeline', 'DeckRepositoryInterface', 'StorageDeckRepository']

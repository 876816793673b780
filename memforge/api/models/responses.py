from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from memforge.domain.deck.models import Deck


class CardModel(BaseModel):
    front: str
    back: str


class GenerateFlashcardsResponse(BaseModel):
    flashcards: List[CardModel]
    count: int


class DeckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    cards: List[CardModel]
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckResponse":
        return cls(
            id=deck.id,
            name=deck.name,
            cards=[CardModel(front=card.front, back=card.back) for card in deck.cards],
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    services: Dict[str, bool]

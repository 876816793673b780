from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class GenerateFlashcardsRequest(BaseModel):
    """Request schema for generating flashcards"""

    text: str = Field("", description="Study text to turn into flashcards")

    model_config = ConfigDict(json_schema_extra={"example": {"text": "Paris is the capital of France."}})


class DeckRequest(BaseModel):
    """Request schema for creating or replacing a deck.

    Fields are checked by the deck repository so invalid decks answer 400.
    """

    name: str = Field("", description="Deck name")
    cards: List[Any] = Field(default_factory=list, description="Ordered front/back cards")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Bio101",
                "cards": [{"front": "What is the powerhouse of the cell?", "back": "The mitochondria"}],
            }
        }
    )

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from memforge.core.exceptions.base import ValidationError


@dataclass(frozen=True)
class Card:
    """Domain model representing a Flashcard."""

    front: str
    back: str

    def __post_init__(self):
        """Validate card data after initialization."""
        for name in ("front", "back"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"Card {name} must be a non-empty string", name)
            # Frozen dataclass: trimmed value goes through object.__setattr__
            object.__setattr__(self, name, value.strip())

    @classmethod
    def from_dict(cls, data: Any) -> "Card":
        if isinstance(data, Card):
            return data
        if not isinstance(data, dict):
            raise ValidationError("Card must be an object with front and back", "card")
        return cls(front=data.get("front"), back=data.get("back"))

    def to_dict(self) -> Dict[str, str]:
        return {"front": self.front, "back": self.back}


@dataclass(frozen=True)
class Deck:
    """A named, ordered collection of cards. ``id`` stays None until the deck is saved."""

    name: str
    cards: Tuple[Card, ...]
    created_at: datetime
    updated_at: datetime
    id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Deck name is required", "name")
        if not self.cards:
            raise ValidationError("Deck must contain at least one card", "cards")
        if not all(isinstance(card, Card) for card in self.cards):
            raise ValidationError("Deck cards must be Card instances", "cards")
        if self.updated_at < self.created_at:
            raise ValidationError("Deck cannot be updated before it was created", "updated_at")
        object.__setattr__(self, "cards", tuple(self.cards))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "cards": [card.to_dict() for card in self.cards],
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        return cls(
            id=data["id"],
            name=data["name"],
            cards=tuple(Card.from_dict(card) for card in data["cards"]),
            created_at=datetime.fromisoformat(data["createdAt"]),
            updated_at=datetime.fromisoformat(data["updatedAt"]),
        )


@dataclass
class FlashcardBatch:
    """Validated cards produced by the generation pipeline, not yet saved."""

    cards: List[Card] = field(default_factory=list)
    discarded: int = 0

    @property
    def count(self) -> int:
        return len(self.cards)

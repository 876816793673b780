import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable, List, Optional, Tuple

from ..core.exceptions.base import NotFoundError, ValidationError
from ..core.exceptions.domain import StorageError
from ..domain.deck.models import Card, Deck
from ..storage.base import StorageBackend

logger = logging.getLogger(__name__)

DECK_INDEX_KEY = "decks"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_deck_input(name: Any, cards: Any) -> Tuple[str, Tuple[Card, ...]]:
    """
    Check a deck name and card list against the deck invariants.

    Returns:
        The trimmed name and the validated cards

    Raises:
        ValidationError: If the name is empty, there are no cards, or a card is invalid
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Deck name is required", "name")

    if not isinstance(cards, (list, tuple)):
        raise ValidationError("Name and cards array are required", "cards")

    if not cards:
        raise ValidationError("Deck must contain at least one card", "cards")

    validated = []
    for index, card in enumerate(cards):
        try:
            validated.append(Card.from_dict(card))
        except ValidationError as e:
            raise ValidationError(
                f"Card {index + 1} is invalid: {e.message}",
                f"cards[{index}]",
                {"index": index, "card_field": e.details.get("field")},
            ) from e
    return name.strip(), tuple(validated)


class DeckRepositoryInterface(ABC):
    """Abstract base class defining the interface for deck repositories."""

    @abstractmethod
    async def create(self, name: str, cards: Iterable[Any]) -> Deck:
        """Validate and persist a new deck."""
        pass

    @abstractmethod
    async def get(self, deck_id: str) -> Deck:
        """Return a deck or raise NotFoundError."""
        pass

    @abstractmethod
    async def list(self) -> List[Deck]:
        """Return all decks, newest first."""
        pass

    @abstractmethod
    async def update(self, deck_id: str, name: str, cards: Iterable[Any]) -> Deck:
        """Validate and replace the name and cards of an existing deck."""
        pass

    @abstractmethod
    async def delete(self, deck_id: str) -> None:
        """Remove a deck or raise NotFoundError."""
        pass


class StorageDeckRepository(DeckRepositoryInterface):
    """Deck repository on top of a StorageBackend.

    Decks are JSON documents under ``deck:<id>``; the ``decks`` sorted set
    indexes deck ids by creation timestamp.
    """

    def __init__(
        self,
        storage: StorageBackend,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self.storage = storage
        self.clock = clock
        self.id_factory = id_factory

    @staticmethod
    def _key(deck_id: str) -> str:
        return f"deck:{deck_id}"

    async def _load(self, deck_id: str) -> Optional[Deck]:
        try:
            data = await self.storage.get(self._key(deck_id))
        except Exception as e:
            raise StorageError("read", e, {"deck_id": deck_id}) from e
        return Deck.from_dict(data) if data else None

    async def _save(self, deck: Deck, operation: str) -> None:
        key = self._key(deck.id)
        try:
            await self.storage.set(key, deck.to_dict())
            if operation == "create":
                await self._index(deck, key)
        except Exception as e:
            raise StorageError(operation, e, {"deck_id": deck.id}) from e

    async def _index(self, deck: Deck, key: str) -> None:
        try:
            await self.storage.zadd(DECK_INDEX_KEY, {deck.id: deck.created_at.timestamp()})
        except Exception:
            # An unindexed document would never be listed
            await self.storage.delete(key)
            raise

    async def create(self, name: str, cards: Iterable[Any]) -> Deck:
        name, validated = validate_deck_input(name, cards)
        now = self.clock()
        deck = Deck(id=self.id_factory(), name=name, cards=validated, created_at=now, updated_at=now)

        await self._save(deck, "create")
        logger.info(f"Deck saved: {deck.name}", extra={"details": {"deck_id": deck.id, "cards": len(validated)}})
        return deck

    async def get(self, deck_id: str) -> Deck:
        deck = await self._load(deck_id)
        if deck is None:
            raise NotFoundError("Deck", deck_id)
        return deck

    async def list(self) -> List[Deck]:
        try:
            deck_ids = await self.storage.zrevrange(DECK_INDEX_KEY, 0, -1)
        except Exception as e:
            raise StorageError("list", e) from e

        decks = []
        for deck_id in deck_ids:
            deck = await self._load(deck_id)
            # Skip ids whose document was deleted concurrently
            if deck is not None:
                decks.append(deck)
        return decks

    async def update(self, deck_id: str, name: str, cards: Iterable[Any]) -> Deck:
        name, validated = validate_deck_input(name, cards)
        existing = await self.get(deck_id)

        now = self.clock()
        if now <= existing.updated_at:
            now = existing.updated_at + timedelta(microseconds=1)

        deck = Deck(
            id=existing.id,
            name=name,
            cards=validated,
            created_at=existing.created_at,
            updated_at=now,
        )
        await self._save(deck, "update")
        logger.info(f"Deck updated: {deck.name}", extra={"details": {"deck_id": deck.id, "cards": len(validated)}})
        return deck

    async def delete(self, deck_id: str) -> None:
        try:
            existed = await self.storage.delete(self._key(deck_id))
            await self.storage.zrem(DECK_INDEX_KEY, deck_id)
        except Exception as e:
            raise StorageError("delete", e, {"deck_id": deck_id}) from e

        if not existed:
            raise NotFoundError("Deck", deck_id)
        logger.info(f"Deck deleted: {deck_id}")

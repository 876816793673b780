from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Set a JSON-serializable value."""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Get a value by key."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a value by key. Returns whether the key existed."""
        pass

    @abstractmethod
    async def zadd(self, key: str, mapping: Dict[str, float]) -> None:
        """Add to a sorted set with scores."""
        pass

    @abstractmethod
    async def zrevrange(self, key: str, start: int, end: int) -> list:
        """Get range from sorted set in reverse order (inclusive, negative indexes allowed)."""
        pass

    @abstractmethod
    async def zrem(self, key: str, member: str) -> None:
        """Remove a member from a sorted set."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check the backend is reachable."""
        pass

    async def close(self) -> None:
        """Release connections held by the backend."""
        pass

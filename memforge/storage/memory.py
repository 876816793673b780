import copy
from typing import Any, Dict, Optional

from .base import StorageBackend


class DictionaryBackend(StorageBackend):
    """In-memory dictionary storage backend implementation."""

    def __init__(self):
        self.data: Dict[str, Any] = {}
        self.sorted_sets: Dict[str, Dict[str, float]] = {}

    async def set(self, key: str, value: Any) -> None:
        # Stored by value, like a remote store would
        self.data[key] = copy.deepcopy(value)

    async def get(self, key: str) -> Optional[Any]:
        value = self.data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    async def zadd(self, key: str, mapping: Dict[str, float]) -> None:
        if key not in self.sorted_sets:
            self.sorted_sets[key] = {}
        self.sorted_sets[key].update(mapping)

    async def zrevrange(self, key: str, start: int, end: int) -> list:
        if key not in self.sorted_sets:
            return []
        sorted_items = sorted(self.sorted_sets[key].items(), key=lambda x: x[1], reverse=True)
        size = len(sorted_items)
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = size + end
        return [item[0] for item in sorted_items[start : end + 1]]

    async def zrem(self, key: str, member: str) -> None:
        if key in self.sorted_sets:
            self.sorted_sets[key].pop(member, None)

    async def ping(self) -> bool:
        return True

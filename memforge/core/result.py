from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions.base import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of a pipeline stage: either a value or the error that stopped it."""

    value: Optional[T] = None
    error: Optional[AppError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AppError) -> "StageResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value, raising the captured error for a failed result."""
        if self.error is not None:
            raise self.error
        return self.value

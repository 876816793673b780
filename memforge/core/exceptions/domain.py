from typing import Any, Dict, Optional

from .base import AppError, ExternalServiceError


class UpstreamError(ExternalServiceError):
    """Provider was reachable but answered with an error or a malformed envelope"""

    def __init__(
        self,
        service: str,
        provider_message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict] = None,
    ):
        super().__init__(
            service,
            "Failed to generate flashcards",
            "UPSTREAM_ERROR",
            {"provider_message": provider_message, "status_code": status_code, **(details or {})},
        )


class TransportError(ExternalServiceError):
    """Provider could not be reached (network failure or timeout)"""

    def __init__(self, service: str, reason: str, details: Optional[Dict] = None):
        super().__init__(
            service,
            "Failed to reach the flashcard generation service",
            "TRANSPORT_ERROR",
            {"reason": reason, **(details or {})},
        )


class ParseError(AppError):
    """Provider output is not a JSON array"""

    def __init__(self, reason: str, details: Optional[Dict] = None):
        super().__init__(
            "Failed to parse AI response. Please try again.",
            "PARSE_ERROR",
            {"reason": reason, **(details or {})},
        )


class EmptyResultError(AppError):
    """Provider output parsed but held no usable flashcards"""

    def __init__(self, candidates: int, details: Optional[Dict] = None):
        super().__init__(
            "No valid flashcards could be generated. Please try again with different text.",
            "EMPTY_RESULT",
            {"candidates": candidates, **(details or {})},
        )


class StorageError(AppError):
    """Raised when deck storage operations fail"""

    def __init__(self, operation: str, reason: Any, details: Optional[Dict] = None):
        super().__init__(
            f"Deck storage {operation} failed",
            "STORAGE_ERROR",
            {"operation": operation, "reason": str(reason), **(details or {})},
        )

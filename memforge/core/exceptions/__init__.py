from .base import AppError, ConfigurationError, ExternalServiceError, NotFoundError, ValidationError
from .domain import EmptyResultError, ParseError, StorageError, TransportError, UpstreamError

__all__ = [
    'AppError',
    'ConfigurationError',
    'EmptyResultError',
    'ExternalServiceError',
    'NotFoundError',
    'ParseError',
    'StorageError',
    'TransportError',
    'UpstreamError',
    'ValidationError',
]

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional, ParamSpec, Type, TypeVar

from fastapi import HTTPException

from .exceptions.base import AppError
from .result import StageResult

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

ErrorMapping = Dict[Type[Exception], tuple[int, str]]

DEFAULT_ERROR_MAPPING: ErrorMapping = {
    AppError: (500, "Internal application error"),
    Exception: (500, "Internal server error"),
}


def _resolve_mapping(exc: Exception, mapping: ErrorMapping) -> tuple[int, str]:
    # Walk the MRO so the most specific registered class wins
    for exc_type in type(exc).__mro__:
        if exc_type in mapping:
            return mapping[exc_type]
    return 500, "Internal server error"


def _log_data(func: Callable, exc: Exception) -> Dict[str, Any]:
    log_data = {
        "function_name": func.__name__,
        "function_module": func.__module__,
        "exception_type": type(exc).__name__,
    }
    if isinstance(exc, AppError):
        log_data.update({"error_code": exc.error_code, "details": exc.details})
    return log_data


def error_body(summary: str, exc: Exception) -> Dict[str, Any]:
    """Build the JSON error payload returned to API callers."""
    if isinstance(exc, AppError):
        return {"error": summary, "error_code": exc.error_code, "message": exc.message, "details": exc.details}
    return {"error": summary, "error_code": "INTERNAL_ERROR", "message": summary, "details": {}}


def handle_exceptions(
    error_mapping: Optional[ErrorMapping] = None,
    log_level: int = logging.WARNING,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Map application errors raised by a route into HTTP responses

    Args:
        error_mapping: Custom mapping of exceptions to (status_code, summary)
        log_level: Logging level for mapped application errors

    Usage:
        @handle_exceptions({
            ValidationError: (400, "Invalid deck"),
            NotFoundError: (404, "Deck not found"),
        })
        async def my_route():
            ...
    """
    combined_mapping = {**DEFAULT_ERROR_MAPPING, **(error_mapping or {})}

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                status_code, summary = _resolve_mapping(e, combined_mapping)
                if isinstance(e, AppError):
                    logger.log(log_level, e.message, extra=_log_data(func, e))
                else:
                    logger.exception("Unhandled exception in %s", func.__name__, extra=_log_data(func, e))
                raise HTTPException(status_code=status_code, detail=error_body(summary, e)) from e

        return wrapper

    return decorator


def capture_errors(func: Callable[P, T]) -> Callable[P, StageResult[T]]:
    """
    Turn a stage function into one that returns a StageResult.

    Application errors become failed results; anything else propagates.
    Failures are not logged here: whoever unwraps the result reports them.
    Works for both plain and async functions.
    """
    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> StageResult[T]:
            try:
                return StageResult.success(await func(*args, **kwargs))
            except AppError as e:
                return StageResult.failure(e)

        return async_wrapper

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> StageResult[T]:
        try:
            return StageResult.success(func(*args, **kwargs))
        except AppError as e:
            return StageResult.failure(e)

    return wrapper

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from memforge.core.container import AppContainer, get_container

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check(container: AppContainer = Depends(get_container)):
    """
    Perform system health check.

    Only the deck store is probed; the generation provider is not called.

    Returns:
        JSONResponse: 200 when healthy, 503 otherwise
    """
    try:
        storage_ok = await container.storage.ping()
    except Exception as e:
        logger.error(f"Storage health check failed: {e}")
        storage_ok = False

    status = "healthy" if storage_ok else "unhealthy"
    return JSONResponse(
        content={"status": status, "services": {"storage": storage_ok}},
        status_code=200 if storage_ok else 503,
    )

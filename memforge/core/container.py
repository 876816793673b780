import logging
from dataclasses import dataclass
from typing import AsyncIterator

from fastapi import Request
from redis.asyncio import Redis

from memforge.core.config import Settings
from memforge.core.exceptions.base import ConfigurationError
from memforge.domain.gateway.base import GenerationGateway
from memforge.domain.gateway.factory import GatewayFactory
from memforge.repositories.deck_repository import DeckRepositoryInterface, StorageDeckRepository
from memforge.storage.base import StorageBackend
from memforge.storage.memory import DictionaryBackend
from memforge.storage.redis import RedisBackend

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Process-wide dependencies, built once at startup and held on ``app.state``."""

    settings: Settings
    storage: StorageBackend
    deck_repository: DeckRepositoryInterface

    async def close(self) -> None:
        await self.storage.close()
        logger.info("Storage connection closed")


async def create_storage(settings: Settings) -> StorageBackend:
    """Create the configured storage backend and verify it is reachable."""
    if settings.storage_type == "redis":
        redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            decode_responses=True,
            max_connections=settings.redis_max_connections,
        )
        storage = RedisBackend(redis_client)
        await storage.ping()
    else:
        storage = DictionaryBackend()

    logger.info(f"{settings.storage_type} storage connection established successfully")
    return storage


async def build_container(settings: Settings) -> AppContainer:
    """Initialize application dependencies."""
    logger.info("Initializing application dependencies...")
    if settings.generation_provider not in GatewayFactory.get_available_providers():
        raise ConfigurationError(
            f"Unsupported generation provider: {settings.generation_provider}",
            {"available_providers": GatewayFactory.get_available_providers()},
        )

    storage = await create_storage(settings)
    container = AppContainer(
        settings=settings,
        storage=storage,
        deck_repository=StorageDeckRepository(storage),
    )
    logger.info("Dependencies initialized successfully")
    return container


# FastAPI dependencies
def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).settings


def get_deck_repository(request: Request) -> DeckRepositoryInterface:
    """Dependency for getting the deck repository."""
    return get_container(request).deck_repository


async def get_gateway(request: Request) -> AsyncIterator[GenerationGateway]:
    """Dependency yielding a per-request generation gateway, closed afterwards."""
    async with GatewayFactory.create(get_settings(request)) as gateway:
        yield gateway

from types import SimpleNamespace
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from memforge.api.main import create_app
from memforge.core.config import Settings
from memforge.core.container import get_gateway
from memforge.domain.gateway.base import GenerationGateway
from memforge.domain.generation.prompts import GenerationRequest
from memforge.repositories.deck_repository import StorageDeckRepository
from memforge.storage.memory import DictionaryBackend


def chat_response(content):
    """Minimal chat-completion envelope as returned by the provider SDKs."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeGateway(GenerationGateway):
    """Scripted gateway recording every request it receives."""

    name = "fake"

    def __init__(self, response: Optional[str] = None, error: Optional[Exception] = None):
        super().__init__(api_key="test-key")
        self.response = response
        self.error = error
        self.requests: List[GenerationRequest] = []
        self.closed = False

    async def initialize(self) -> None:
        self.client = object()

    async def complete(self, request: GenerationRequest):
        self.requests.append(request)
        if self.error:
            raise self.error
        return chat_response(self.response)

    async def cleanup(self) -> None:
        self.closed = True


@pytest.fixture
def fake_gateway():
    return FakeGateway(response='[{"front": "What is the capital of France?", "back": "Paris"}]')


@pytest.fixture
def storage():
    return DictionaryBackend()


@pytest.fixture
def repository(storage):
    return StorageDeckRepository(storage)


@pytest.fixture
def settings():
    return Settings(storage_type="memory", generation_provider="groq", groq_api_key=None)


@pytest.fixture
def client(settings, fake_gateway):
    app = create_app(settings)
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    with TestClient(app) as test_client:
        yield test_client

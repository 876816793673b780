from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, Mock

import httpx
import pytest
from groq import APIConnectionError, APIStatusError, APITimeoutError

from memforge.core.config import Settings
from memforge.core.exceptions.base import ConfigurationError
from memforge.core.exceptions.domain import TransportError, UpstreamError
from memforge.domain.gateway.factory import GatewayFactory
from memforge.domain.gateway.providers.groq import GroqGateway
from memforge.domain.gateway.providers.mistral import MistralGateway
from memforge.domain.generation.prompts import build_prompt

from .conftest import FakeGateway, chat_response

GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"


@pytest.fixture
def request_payload():
    return build_prompt("Paris is the capital of France.").value


def groq_gateway(create: AsyncMock) -> GroqGateway:
    gateway = GroqGateway(api_key="gsk_test_key", model="llama-test", temperature=0.2, max_tokens=256)
    gateway.client = Mock()
    gateway.client.chat.completions.create = create
    gateway.client.close = AsyncMock()
    gateway.is_initialized = True
    return gateway


def mistral_gateway(complete_async: AsyncMock) -> MistralGateway:
    gateway = MistralGateway(api_key="mistral_test_key")
    gateway.client = Mock(spec=["chat"])
    gateway.client.chat.complete_async = complete_async
    gateway.is_initialized = True
    return gateway


class TestGroqGateway:
    async def test_returns_message_content(self, request_payload):
        create = AsyncMock(return_value=chat_response('  [{"front":"Q","back":"A"}]  '))
        gateway = groq_gateway(create)

        assert await gateway.generate(request_payload) == '[{"front":"Q","back":"A"}]'
        create.assert_awaited_once_with(
            messages=request_payload.to_messages(), model="llama-test", temperature=0.2, max_tokens=256
        )

    async def test_status_error_is_upstream_error(self, request_payload):
        response = httpx.Response(429, request=httpx.Request("POST", GROQ_URL))
        gateway = groq_gateway(AsyncMock(side_effect=APIStatusError("Rate limit reached", response=response, body=None)))

        with pytest.raises(UpstreamError) as exc_info:
            await gateway.generate(request_payload)

        assert exc_info.value.details["status_code"] == 429
        assert exc_info.value.details["provider_message"] == "Rate limit reached"
        assert exc_info.value.message == "Failed to generate flashcards"

    @pytest.mark.parametrize("error_class", [APIConnectionError, APITimeoutError])
    async def test_connection_failures_are_transport_errors(self, request_payload, error_class):
        gateway = groq_gateway(AsyncMock(side_effect=error_class(request=httpx.Request("POST", GROQ_URL))))

        with pytest.raises(TransportError):
            await gateway.generate(request_payload)

    @pytest.mark.parametrize(
        "response",
        [SimpleNamespace(choices=[]), object(), chat_response(None), chat_response("   ")],
    )
    async def test_malformed_envelope_is_upstream_error(self, request_payload, response):
        gateway = groq_gateway(AsyncMock(return_value=response))

        with pytest.raises(UpstreamError):
            await gateway.generate(request_payload)

    async def test_missing_key_is_configuration_error(self, request_payload):
        with pytest.raises(ConfigurationError) as exc_info:
            await GroqGateway(api_key=None).generate(request_payload)
        assert exc_info.value.details["setting"] == "GROQ_API_KEY"

    async def test_cleanup_closes_client(self):
        gateway = groq_gateway(AsyncMock())
        client = gateway.client

        async with gateway:
            pass

        client.close.assert_awaited_once()
        assert gateway.client is None
        assert not gateway.is_initialized


class TestMistralGateway:
    async def test_returns_message_content(self, request_payload):
        gateway = mistral_gateway(AsyncMock(return_value=chat_response("[]")))
        assert await gateway.generate(request_payload) == "[]"
        assert gateway.model == "mistral-large-latest"

    async def test_joins_chunked_content(self, request_payload):
        chunks = [SimpleNamespace(text='[{"front":"Q",'), SimpleNamespace(text='"back":"A"}]')]
        gateway = mistral_gateway(AsyncMock(return_value=chat_response(chunks)))
        assert await gateway.generate(request_payload) == '[{"front":"Q","back":"A"}]'

    async def test_network_failure_is_transport_error(self, request_payload):
        gateway = mistral_gateway(AsyncMock(side_effect=httpx.ConnectError("connection refused")))

        with pytest.raises(TransportError) as exc_info:
            await gateway.generate(request_payload)
        assert exc_info.value.details["reason"] == "connection refused"

    async def test_missing_key_is_configuration_error(self, request_payload):
        with pytest.raises(ConfigurationError):
            await MistralGateway(api_key=None).generate(request_payload)

    async def test_cleanup_closes_client(self):
        gateway = mistral_gateway(AsyncMock())
        gateway.client = MagicMock()
        client = gateway.client

        async with gateway:
            pass

        client.__aexit__.assert_awaited_once_with(None, None, None)
        assert gateway.client is None
        assert not gateway.is_initialized


class TestGatewayFactory:
    def test_creates_configured_provider(self):
        settings = Settings(generation_provider="Mistral", mistral_api_key="mistral_test_key", generation_max_tokens=42)
        gateway = GatewayFactory.create(settings)

        assert isinstance(gateway, MistralGateway)
        assert gateway.api_key == "mistral_test_key"
        assert gateway.max_tokens == 42
        assert not gateway.is_initialized

    def test_blank_key_counts_as_missing(self):
        gateway = GatewayFactory.create(Settings(generation_provider="groq", groq_api_key="   "))
        assert gateway.api_key is None

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError):
            GatewayFactory.create(Settings(generation_provider="nope"))

    def test_register_gateway(self, monkeypatch):
        monkeypatch.setattr(GatewayFactory, "_gateways", dict(GatewayFactory._gateways))
        GatewayFactory.register_gateway("fake", FakeGateway)

        assert "fake" in GatewayFactory.get_available_providers()
        with pytest.raises(ConfigurationError):
            GatewayFactory.register_gateway("Groq", FakeGateway)

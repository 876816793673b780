import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from memforge.core.exceptions.base import ConfigurationError
from memforge.core.exceptions.domain import UpstreamError
from memforge.domain.generation.prompts import GenerationRequest

logger = logging.getLogger(__name__)


class GenerationGateway(ABC):
    """Abstract base class for all text-generation providers"""

    name: str = "generation"
    default_model: str = ""

    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ):
        self.api_key = api_key
        self.model = model or self.default_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = None
        self.is_initialized = False

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize any necessary clients or resources"""
        pass

    @abstractmethod
    async def complete(self, request: GenerationRequest) -> Any:
        """Send the request to the provider and return its raw response envelope"""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup any resources"""
        pass

    async def generate(self, request: GenerationRequest) -> str:
        """
        Generate raw flashcard text for the request. Each call reaches the provider at most once.

        Raises:
            ConfigurationError: If the provider credential is missing
            UpstreamError: If the provider answered with an error or malformed envelope
            TransportError: If the provider could not be reached
        """
        await self.ensure_initialized()
        response = await self.complete(request)
        content = self.extract_content(response)
        logger.debug(f"{self.name} response: {content[:200]}")
        return content

    def extract_content(self, response: Any) -> str:
        """Pull the message text out of a chat-completion envelope."""
        choices = getattr(response, "choices", None)
        if not choices:
            raise UpstreamError(self.name, "Response contained no choices", details={"received": type(response).__name__})

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if isinstance(content, list):
            # Some SDKs return a list of content chunks
            content = "".join(getattr(chunk, "text", "") or "" for chunk in content)
        if not isinstance(content, str) or not content.strip():
            raise UpstreamError(self.name, "Response contained no message content")
        return content.strip()

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                f"{self.name} API key is not configured",
                {"provider": self.name, "setting": f"{self.name.upper()}_API_KEY"},
            )
        return self.api_key

    async def ensure_initialized(self) -> None:
        """Ensure the gateway is initialized before use."""
        if not self.is_initialized:
            await self.initialize()
            self.is_initialized = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

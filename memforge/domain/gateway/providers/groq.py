from groq import APIConnectionError, APIError, APIStatusError, AsyncGroq

from memforge.core.exceptions.domain import TransportError, UpstreamError
from memforge.domain.generation.prompts import GenerationRequest

from ..base import GenerationGateway


class GroqGateway(GenerationGateway):
    """Groq API implementation of GenerationGateway."""

    name = "groq"
    default_model = "llama-3.1-8b-instant"

    async def initialize(self) -> None:
        """Initialize Groq client."""
        self.client = AsyncGroq(api_key=self.require_api_key(), max_retries=0)

    async def complete(self, request: GenerationRequest):
        try:
            return await self.client.chat.completions.create(
                messages=request.to_messages(),
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIConnectionError as e:
            # Includes APITimeoutError
            raise TransportError(self.name, str(e), {"model": self.model}) from e
        except APIStatusError as e:
            raise UpstreamError(self.name, e.message, e.status_code, {"model": self.model}) from e
        except APIError as e:
            raise UpstreamError(self.name, e.message, details={"model": self.model}) from e

    async def cleanup(self) -> None:
        """Cleanup Groq client resources."""
        if self.client:
            await self.client.close()
            self.client = None
            self.is_initialized = False

import httpx
from mistralai import Mistral, models

from memforge.core.exceptions.domain import TransportError, UpstreamError
from memforge.domain.generation.prompts import GenerationRequest

from ..base import GenerationGateway


class MistralGateway(GenerationGateway):
    """Mistral API implementation of GenerationGateway."""

    name = "mistral"
    default_model = "mistral-large-latest"

    async def initialize(self) -> None:
        """Initialize Mistral client."""
        self.client = Mistral(api_key=self.require_api_key())

    async def complete(self, request: GenerationRequest):
        try:
            return await self.client.chat.complete_async(
                model=self.model,
                messages=request.to_messages(),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except httpx.RequestError as e:
            raise TransportError(self.name, str(e) or type(e).__name__, {"model": self.model}) from e
        except (models.SDKError, models.HTTPValidationError) as e:
            raise UpstreamError(
                self.name, getattr(e, "message", str(e)), getattr(e, "status_code", None), {"model": self.model}
            ) from e

    async def cleanup(self) -> None:
        """Cleanup Mistral client resources."""
        if self.client:
            # The SDK releases its HTTP clients on context exit
            await self.client.__aexit__(None, None, None)
            self.client = None
            self.is_initialized = False

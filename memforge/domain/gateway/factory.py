from typing import Dict, Type

from memforge.core.config import Settings
from memforge.core.exceptions.base import ConfigurationError

from .base import GenerationGateway
from .providers.groq import GroqGateway
from .providers.mistral import MistralGateway


class GatewayFactory:
    """Factory class for creating generation gateway instances."""

    _gateways: Dict[str, Type[GenerationGateway]] = {'groq': GroqGateway, 'mistral': MistralGateway}

    @classmethod
    def create(cls, settings: Settings) -> GenerationGateway:
        """
        Create an uninitialized gateway for the configured provider.

        The provider client is built lazily on the first ``generate`` call, so a
        missing credential surfaces as a ConfigurationError at that point.

        Raises:
            ConfigurationError: If the provider is not registered
        """
        provider = settings.generation_provider.lower()
        gateway_class = cls._gateways.get(provider)
        if not gateway_class:
            raise ConfigurationError(
                f"Unsupported generation provider: {provider}",
                {"available_providers": cls.get_available_providers()},
            )

        return gateway_class(
            api_key=getattr(settings, f"{provider}_api_key", None),
            model=settings.generation_model,
            temperature=settings.generation_temperature,
            max_tokens=settings.generation_max_tokens,
        )

    @classmethod
    def register_gateway(cls, name: str, gateway_class: Type[GenerationGateway]) -> None:
        """
        Register a new provider.

        Raises:
            ConfigurationError: If the name is empty or already registered
        """
        if not name:
            raise ConfigurationError("Provider name must be specified")

        if name.lower() in cls._gateways:
            raise ConfigurationError(
                f"Provider {name} is already registered", {"existing_providers": cls.get_available_providers()}
            )

        cls._gateways[name.lower()] = gateway_class

    @classmethod
    def get_available_providers(cls) -> list[str]:
        """Get a list of all available providers."""
        return list(cls._gateways.keys())

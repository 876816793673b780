from .base import GenerationGateway
from .factory import GatewayFactory

__all__ = ['GatewayFactory', 'GenerationGateway']

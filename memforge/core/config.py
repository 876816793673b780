from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_TYPES = ("memory", "redis")


class Settings(BaseSettings):
    generation_provider: str = Field("groq", description="Text-generation provider used for flashcards")
    groq_api_key: Optional[str] = Field(None, description="API Key for Groq chatbot service")
    mistral_api_key: Optional[str] = Field(None, description="API Key for Mistral chatbot service")
    generation_model: Optional[str] = Field(None, description="Model override; provider default when unset")
    generation_temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature")
    generation_max_tokens: int = Field(1000, gt=0, description="Maximum tokens in the provider answer")
    max_input_length: Optional[int] = Field(None, gt=0, description="Maximum study text length; unbounded when unset")
    storage_type: str = Field("memory", description="Deck storage backend")
    redis_host: str = Field("localhost", description="Redis host")
    redis_port: int = Field(6379, description="Redis port")
    redis_max_connections: int = Field(10, description="Redis max connections")
    api_prefix: str = Field("", description="Prefix applied to every API route")
    cors_origins: List[str] = Field(["*"], description="Origins allowed to call the API")
    log_level: str = Field("INFO", description="Root logging level")
    environment: str = Field("development", description="Deployment environment name")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator('groq_api_key', 'mistral_api_key')
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """
        Treat blank API keys as missing so the gateway reports a configuration error.
        """
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator('generation_provider')
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator('storage_type')
    def validate_storage_type(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in STORAGE_TYPES:
            raise ValueError(f"Unsupported storage type: {v}. Allowed: {STORAGE_TYPES}")
        return v


# Create a settings instance
settings = Settings()

# Export settings instance
__all__ = ['Settings', 'settings']

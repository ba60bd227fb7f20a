"""
Language model configuration settings.

Settings for the chat model that rewrites operator queries.

Dependencies: pydantic, pydantic_settings
System role: LLM configuration for query processing
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration (OpenAI or Google Gemini)."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    provider: str = Field(default="openai", description="Chat provider: 'openai' or 'google'")
    model: str = Field(
        default="gpt-3.5-turbo",
        validation_alias=AliasChoices("LLM_MODEL", "OPENAI_MODEL"),
        description="Chat model name",
    )
    openai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "LLM_OPENAI_API_KEY"),
        description="OpenAI API key",
    )
    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")

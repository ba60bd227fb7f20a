"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.embedding import EmbeddingSettings
from backend.configs.llm import LLMSettings
from backend.configs.settings import Settings, get_settings
from backend.configs.vector_store import VectorStoreSettings

__all__ = [
    "EmbeddingSettings",
    "LLMSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]

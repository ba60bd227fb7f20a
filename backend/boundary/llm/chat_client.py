"""
Chat model client.

Sends a single composed prompt to a LangChain chat model (OpenAI by
default, Google Gemini optionally) and returns the answer text.

Dependencies: langchain_core, langchain_openai, langchain_google_genai
System role: Language model provider adapter
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel

from backend.configs import LLMSettings
from backend.core.exceptions import ConfigurationError, LanguageModelError

logger = logging.getLogger(__name__)


def _content_to_text(content: Any) -> str:
    """Flatten AIMessage content (plain string or list of content blocks)."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content)


class ChatClient:
    """Prompt-in, text-out wrapper around a chat model."""

    def __init__(self, model: BaseChatModel, model_name: str = "") -> None:
        self._model = model
        self._model_name = model_name

    async def acomplete(self, prompt: str) -> str:
        """
        Complete a prompt.

        Args:
            prompt: Fully composed prompt

        Returns:
            str: Answer text, untrimmed (may be empty)

        Raises:
            LanguageModelError: If the provider call fails
        """
        try:
            response = await self._model.ainvoke(prompt)
        except Exception as e:
            logger.error(f"{__name__}:acomplete - {type(e).__name__}: {e}")
            raise LanguageModelError(
                f"Failed to process query: {e}",
                details={"model": self._model_name},
            ) from e

        return _content_to_text(getattr(response, "content", response))


def get_chat_client(settings: LLMSettings, proxy_url: str | None = None) -> ChatClient:
    """
    Build the chat client for the configured provider.

    Args:
        settings: LLM settings
        proxy_url: Optional outbound proxy (OpenAI only)

    Returns:
        ChatClient: Ready-to-use client

    Raises:
        ConfigurationError: If the provider is unknown or its API key is missing
    """
    provider = settings.provider.lower()

    if provider == "openai":
        if settings.openai_api_key is None:
            raise ConfigurationError(
                "OPENAI_API_KEY is not configured. Please set it in your .env file.",
                setting="OPENAI_API_KEY",
            )

        from langchain_openai import ChatOpenAI

        model_kwargs: dict[str, Any] = {
            "model": settings.model,
            "api_key": settings.openai_api_key.get_secret_value(),
            "temperature": settings.temperature,
        }
        if proxy_url:
            model_kwargs["openai_proxy"] = proxy_url
        model = ChatOpenAI(**model_kwargs)

    elif provider == "google":
        if settings.google_api_key is None:
            raise ConfigurationError("GOOGLE_API_KEY is not configured", setting="GOOGLE_API_KEY")

        from langchain_google_genai import ChatGoogleGenerativeAI

        model = ChatGoogleGenerativeAI(
            model=settings.model,
            google_api_key=settings.google_api_key.get_secret_value(),
            temperature=settings.temperature,
        )

    else:
        raise ConfigurationError(
            f"Invalid LLM_PROVIDER: {provider}. Must be 'openai' or 'google'.",
            setting="LLM_PROVIDER",
        )

    logger.info(
        f"{__name__}:get_chat_client - Created {provider} chat model",
        extra={"model": settings.model, "proxy": bool(proxy_url)},
    )
    return ChatClient(model, model_name=settings.model)

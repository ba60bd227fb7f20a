"""Language model boundary."""

from backend.boundary.llm.chat_client import ChatClient, get_chat_client

__all__ = ["ChatClient", "get_chat_client"]

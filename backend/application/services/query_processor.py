"""
Query processor.

Rewrites operator queries line by line with a language model: every
non-empty line of the input is sent, with the operator's instruction, as its
own request. Lines are processed concurrently and the answers returned in
input order.

Dependencies: asyncio, backend.boundary.llm, backend.core
System role: Batch query rewriting orchestration
"""

import asyncio
import logging

from backend.boundary.client_cache import get_client_cache
from backend.boundary.llm import ChatClient
from backend.core.exceptions import InvalidArgumentError, LanguageModelError

logger = logging.getLogger(__name__)


def split_query_lines(query: str) -> list[str]:
    """Split on newlines only, trim each line and drop empty ones (trimming removes a CR)."""
    return [line.strip() for line in query.split("\n") if line.strip()]


def compose_prompt(prompt: str, line: str) -> str:
    """Combine the instruction and one query line into a single request."""
    return f'{prompt}\n\nContent to process: "{line}"'


class QueryProcessor:
    """Batch query processor over a chat model."""

    def __init__(self, chat_client: ChatClient | None = None) -> None:
        self._chat_client = chat_client

    @property
    def chat_client(self) -> ChatClient:
        """Lazy-load chat client so configuration is only checked on use."""
        if self._chat_client is None:
            self._chat_client = get_client_cache().chat_client
        return self._chat_client

    async def _process_line(self, line: str, prompt: str) -> str:
        answer = await self.chat_client.acomplete(compose_prompt(prompt, line))
        if not answer or not answer.strip():
            raise LanguageModelError("LLM returned empty response", details={"line": line})
        return answer.strip()

    async def process(self, query: str, prompt: str) -> list[str]:
        """
        Process every line of a multi-line query.

        Args:
            query: One query per line; blank lines are ignored
            prompt: Instruction applied to each line

        Returns:
            list[str]: One answer per non-empty line, in input order

        Raises:
            InvalidArgumentError: If no non-empty line remains
            LanguageModelError: If any line fails or yields an empty answer
            ConfigurationError: If the chat model is not configured
        """
        lines = split_query_lines(query)
        if not lines:
            raise InvalidArgumentError("Query is empty after trimming lines", field="query")

        logger.info("Processing query lines", extra={"line_count": len(lines)})

        # gather keeps input order whatever the completion order
        results = await asyncio.gather(*(self._process_line(line, prompt) for line in lines))

        logger.info("Query lines processed", extra={"line_count": len(results)})
        return list(results)

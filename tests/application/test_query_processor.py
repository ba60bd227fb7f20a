"""
Tests for QueryProcessor.

Verifies line splitting, prompt composition and order preservation under
out-of-order completion.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from backend.application.services.query_processor import (
    QueryProcessor,
    compose_prompt,
    split_query_lines,
)
from backend.core.exceptions import InvalidArgumentError, LanguageModelError


def test_split_query_lines_drops_blank_lines():
    assert split_query_lines("a\n\nb\n  \nc") == ["a", "b", "c"]


def test_split_query_lines_handles_crlf():
    assert split_query_lines(" one \r\ntwo\r\n") == ["one", "two"]


def test_split_query_lines_only_breaks_on_newline():
    assert split_query_lines("a\x0bb\u2028c\nd") == ["a\x0bb\u2028c", "d"]


def test_compose_prompt():
    assert compose_prompt("Rewrite", "hello") == 'Rewrite\n\nContent to process: "hello"'


@pytest.mark.asyncio
async def test_process_preserves_input_order(mock_chat_client):
    delays = {"a": 0.03, "b": 0.0, "c": 0.015}

    async def answer(prompt: str) -> str:
        line = prompt.rsplit('"', 2)[-2]
        await asyncio.sleep(delays[line])
        return f"  {line.upper()}  "

    mock_chat_client.acomplete = AsyncMock(side_effect=answer)
    processor = QueryProcessor(chat_client=mock_chat_client)

    results = await processor.process("a\n\nb\n  \nc", "Uppercase it")

    assert results == ["A", "B", "C"]
    assert mock_chat_client.acomplete.await_count == 3
    sent = [call.args[0] for call in mock_chat_client.acomplete.await_args_list]
    assert sorted(sent) == sorted(compose_prompt("Uppercase it", line) for line in "abc")


@pytest.mark.asyncio
async def test_empty_answer_fails_request(mock_chat_client):
    mock_chat_client.acomplete = AsyncMock(side_effect=["fine", "   "])
    processor = QueryProcessor(chat_client=mock_chat_client)

    with pytest.raises(LanguageModelError, match="empty response"):
        await processor.process("first\nsecond", "Rewrite")


@pytest.mark.asyncio
async def test_only_blank_lines_is_invalid(mock_chat_client):
    processor = QueryProcessor(chat_client=mock_chat_client)

    with pytest.raises(InvalidArgumentError):
        await processor.process("\n   \n", "Rewrite")

    mock_chat_client.acomplete.assert_not_called()


@pytest.mark.asyncio
async def test_model_failure_propagates(mock_chat_client):
    mock_chat_client.acomplete = AsyncMock(side_effect=LanguageModelError("rate limited"))
    processor = QueryProcessor(chat_client=mock_chat_client)

    with pytest.raises(LanguageModelError):
        await processor.process("one", "Rewrite")

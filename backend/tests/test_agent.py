"""Tests for the tool-calling agent."""

import json
from unittest.mock import MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from celestia_agent import agent as agent_module
from celestia_agent.agent import CelestiaAgent, create_llm, decode_agent_response
from celestia_agent.tools.celestia.celestia_tools import search_blocks_tool
from conftest import full_stats_payload, make_response


def _llm_returning(message):
    llm = MagicMock()
    llm.bind_tools.return_value.invoke.return_value = message
    return llm


def test_prompt_sends_preamble_and_prompt() -> None:
    """The system preamble precedes the user prompt."""
    llm = _llm_returning(AIMessage(content="hello"))
    agent = CelestiaAgent(llm, [search_blocks_tool], preamble="Be brief.")

    agent.prompt("hi")

    llm.bind_tools.assert_called_once_with([search_blocks_tool])
    messages = llm.bind_tools.return_value.invoke.call_args.args[0]
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == "Be brief."
    assert isinstance(messages[1], HumanMessage)
    assert messages[1].content == "hi"


def test_prompt_returns_json_encoded_tool_output(mock_session) -> None:
    """Tool results come back as a JSON string literal."""
    mock_session.get.return_value = make_response(200, full_stats_payload(fee="1234"))
    llm = _llm_returning(
        AIMessage(
            content="",
            tool_calls=[{"name": "search_blocks", "args": {"height": 9999}, "id": "call_1"}],
        )
    )
    agent = CelestiaAgent(llm, [search_blocks_tool])

    response = agent.prompt("What is the gas fee of the Celestia block at height 9999?")

    assert response == json.dumps("    The gas fee is: 1234")
    assert decode_agent_response(response) == "    The gas fee is: 1234"
    mock_session.get.assert_called_once_with(
        "https://api-mainnet.celenium.io/v1/block/9999/stats"
    )


def test_prompt_reports_unknown_tool() -> None:
    """Unknown tool names produce an error output."""
    llm = _llm_returning(
        AIMessage(content="", tool_calls=[{"name": "missing", "args": {}, "id": "call_1"}])
    )
    agent = CelestiaAgent(llm, [search_blocks_tool])

    response = agent.prompt("hi")

    assert decode_agent_response(response) == "Error: Tool missing not found."


def test_prompt_returns_plain_text_without_tool_calls() -> None:
    """Plain answers are returned unchanged."""
    agent = CelestiaAgent(_llm_returning(AIMessage(content="no tools needed")), [search_blocks_tool])

    assert agent.prompt("hi") == "no tools needed"


def test_decode_agent_response_rejects_non_string_json() -> None:
    """Only JSON string literals are accepted."""
    with pytest.raises(ValueError):
        decode_agent_response("plain text")
    with pytest.raises(ValueError):
        decode_agent_response("[1, 2]")


def test_create_llm_requires_api_key() -> None:
    """A missing OpenAI key is a configuration error."""
    with patch.object(agent_module, "OPENAI_API_KEY", ""):
        with pytest.raises(ValueError):
            create_llm()


def test_create_llm_rejects_unknown_provider() -> None:
    """Only the openai provider is supported."""
    with patch.object(agent_module, "LLM_PROVIDER", "qwen"):
        with pytest.raises(ValueError):
            create_llm()

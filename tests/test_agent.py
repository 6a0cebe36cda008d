import asyncio
import sys

import pytest
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import McpToolset

from agent.config import Settings, load_settings
from agent.errors import BootstrapError
from agent.weather_time_agent import create_agent, create_model, create_tools, verify_tools

SETTINGS = Settings(google_api_key="test-key", llm_model="gemini/gemini-2.0-flash")


def test_load_settings_reads_environment():
    settings = load_settings(
        {"GOOGLE_API_KEY": "k", "LLM_MODEL": "gemini/gemini-2.0-flash", "LOG_LEVEL": "info"}
    )
    assert settings == Settings("k", "gemini/gemini-2.0-flash", "INFO")


def test_load_settings_defaults():
    assert load_settings({}) == Settings("", "", "WARNING")
    assert load_settings({"LOG_LEVEL": "chatty"}).log_level == "WARNING"


def test_create_model_passes_settings_through():
    model = create_model(SETTINGS)
    assert isinstance(model, LiteLlm)
    assert model.model == "gemini/gemini-2.0-flash"


def test_create_model_without_api_key_fails():
    with pytest.raises(BootstrapError, match="Failed to create model: GOOGLE_API_KEY"):
        create_model(Settings(google_api_key="", llm_model="gemini/gemini-2.0-flash"))


def test_create_model_without_model_id_fails():
    with pytest.raises(BootstrapError, match="Failed to create model: LLM_MODEL"):
        create_model(Settings(google_api_key="test-key", llm_model=""))


def test_create_tools_filters_to_registered_names():
    toolset = create_tools()
    assert isinstance(toolset, McpToolset)
    assert toolset.tool_filter == ["get_weather", "get_current_time"]


def test_create_agent_configuration():
    agent = create_agent(SETTINGS)
    assert agent.name == "weather_time_agent"
    assert agent.description == "Agent to answer questions about the time and weather in a city."
    assert agent.instruction == (
        "You are a helpful agent who can answer user questions about the time"
        " and weather in a city."
    )
    assert isinstance(agent.model, LiteLlm)
    assert len(agent.tools) == 1
    assert isinstance(agent.tools[0], McpToolset)


def test_create_agent_propagates_model_failure():
    with pytest.raises(BootstrapError, match="Failed to create model"):
        create_agent(Settings(google_api_key="", llm_model=""))


def test_agent_advertises_weather_then_time():
    agent = create_agent(SETTINGS)

    async def tool_names():
        try:
            return [tool.name for tool in await agent.canonical_tools()]
        finally:
            await agent.tools[0].close()

    assert asyncio.run(tool_names()) == ["get_weather", "get_current_time"]


def test_verify_tools_lists_the_server():
    assert verify_tools() == ["get_weather", "get_current_time"]


def test_verify_tools_fails_when_server_cannot_start(monkeypatch):
    monkeypatch.setattr(sys, "executable", "/nonexistent/python")
    with pytest.raises(BootstrapError, match="Failed to create tools"):
        verify_tools()

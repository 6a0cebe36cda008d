from types import SimpleNamespace

import pytest
from google.genai import types

from agent.errors import LauncherError
from agent.launcher import Launcher, SingleAgentLoader

AGENT = SimpleNamespace(name="weather_time_agent")


def _event(*parts):
    return SimpleNamespace(content=types.Content(role="model", parts=list(parts)))


class _FakeRunner:
    def __init__(self, reply="The weather in New York is sunny."):
        self.reply = reply
        self.messages = []
        self.closed = False

    async def run_async(self, user_id, session_id, new_message):
        self.messages.append(new_message.parts[0].text)
        yield _event(
            types.Part(
                function_call=types.FunctionCall(name="get_weather", args={"city": "New York"})
            )
        )
        yield _event(types.Part(text=self.reply))

    async def close(self):
        self.closed = True


class _FailingRunner(_FakeRunner):
    async def run_async(self, user_id, session_id, new_message):
        raise RuntimeError("model unavailable")
        yield  # pragma: no cover


def _launcher(runner):
    return Launcher(runner_factory=lambda agent, session_service: runner)


def test_single_agent_loader():
    loader = SingleAgentLoader(AGENT)
    assert loader.list_agents() == ["weather_time_agent"]
    assert loader.load_agent("weather_time_agent") is AGENT
    assert loader.root_agent() is AGENT
    with pytest.raises(LookupError):
        loader.load_agent("other_agent")


def test_query_mode_sends_each_turn(capsys):
    runner = _FakeRunner()
    _launcher(runner).execute(
        SingleAgentLoader(AGENT),
        ["console", "--query", "Weather in New York?", "-q", "And the time?"],
    )

    out = capsys.readouterr().out
    assert runner.messages == ["Weather in New York?", "And the time?"]
    assert "🔧 Calling tool: get_weather" in out
    assert "🤖 Agent: The weather in New York is sunny." in out
    assert runner.closed


def test_mode_defaults_to_console(monkeypatch):
    replies = iter(["What's the weather in New York?", "", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))

    runner = _FakeRunner()
    _launcher(runner).execute(SingleAgentLoader(AGENT), [])

    assert runner.messages == ["What's the weather in New York?"]
    assert runner.closed


def test_console_ends_on_eof(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)

    runner = _FakeRunner()
    _launcher(runner).execute(SingleAgentLoader(AGENT), ["console"])

    assert runner.messages == []
    assert "Goodbye" in capsys.readouterr().out
    assert runner.closed


def test_empty_reply_is_reported(capsys):
    _launcher(_FakeRunner(reply="")).execute(SingleAgentLoader(AGENT), ["-q", "hi"])
    assert "No response generated" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["--bogus"], ["web"], ["--query"]])
def test_bad_arguments_raise_launcher_error(args):
    runner = _FakeRunner()
    with pytest.raises(LauncherError):
        _launcher(runner).execute(SingleAgentLoader(AGENT), args)
    assert runner.messages == []


def test_session_failure_raises_launcher_error():
    runner = _FailingRunner()
    with pytest.raises(LauncherError, match="model unavailable"):
        _launcher(runner).execute(SingleAgentLoader(AGENT), ["-q", "hi"])
    assert runner.closed


def test_command_line_syntax_lists_options():
    syntax = Launcher().command_line_syntax()
    assert syntax.startswith("usage:")
    assert "--query" in syntax
    assert "--user-id" in syntax


class _InterruptedRunner(_FakeRunner):
    async def run_async(self, user_id, session_id, new_message):
        raise KeyboardInterrupt
        yield  # pragma: no cover


def test_ctrl_c_during_turn_ends_session(capsys):
    runner = _InterruptedRunner()
    _launcher(runner).execute(SingleAgentLoader(AGENT), ["-q", "hi"])

    assert "Goodbye" in capsys.readouterr().out
    assert runner.closed

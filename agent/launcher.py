# =============================================================================
# agent/launcher.py  —  Console launcher for a single ADK agent
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Takes an agent (through a loader) plus the command-line arguments and
#   runs a conversation with it:
#
#     python main.py                        → interactive console
#     python main.py console --query "..."  → send one or more turns, exit
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: drives the agent (model turns, tool calls, state)
#   - InMemorySessionService: conversation history, kept in RAM
#   - Content/Part: ADK's message format
#   - Event stream: what the agent says and which tools it calls
#
# FAILURE MODEL:
#   Bad arguments and anything that goes wrong while the session runs come
#   out of execute() as LauncherError.  main.py prints it together with
#   command_line_syntax() and exits non-zero.
# =============================================================================

import argparse
import asyncio
from typing import Any, Callable, Optional

from google.adk.agents import BaseAgent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.errors import LauncherError

QUIT_COMMANDS = ("quit", "exit", "q")
DEFAULT_USER_ID = "user"

RunnerFactory = Callable[[BaseAgent, InMemorySessionService], Any]


class SingleAgentLoader:
    """Serves exactly one agent, which is also the root agent."""

    def __init__(self, root: BaseAgent):
        self._root = root

    def list_agents(self) -> list[str]:
        return [self._root.name]

    def load_agent(self, name: str) -> BaseAgent:
        if name != self._root.name:
            raise LookupError(
                f"cannot load agent '{name}': only '{self._root.name}' is available"
            )
        return self._root

    def root_agent(self) -> BaseAgent:
        return self._root


class _ArgumentParser(argparse.ArgumentParser):
    # argparse would print and sys.exit(2); the launcher reports errors itself.
    def error(self, message: str):
        raise LauncherError(message)


def _default_runner(agent: BaseAgent, session_service: InMemorySessionService) -> Runner:
    return Runner(
        agent=agent,
        app_name=agent.name,
        session_service=session_service,
    )


class Launcher:
    """Parses launcher arguments and runs a console session."""

    def __init__(self, runner_factory: Optional[RunnerFactory] = None, prog: str = "main.py"):
        self._runner_factory = runner_factory or _default_runner
        self._parser = self._build_parser(prog)

    @staticmethod
    def _build_parser(prog: str) -> argparse.ArgumentParser:
        parser = _ArgumentParser(
            prog=prog,
            description="Chat with the weather & time agent.",
        )
        parser.add_argument(
            "mode",
            nargs="?",
            default="console",
            choices=["console"],
            help="launcher mode (default: console)",
        )
        parser.add_argument(
            "--user-id",
            default=DEFAULT_USER_ID,
            help=f"user id for the session (default: {DEFAULT_USER_ID})",
        )
        parser.add_argument(
            "-q",
            "--query",
            action="append",
            default=[],
            metavar="TEXT",
            help="send TEXT as a user turn instead of reading stdin; repeatable",
        )
        return parser

    def command_line_syntax(self) -> str:
        return self._parser.format_help()

    def execute(self, loader: SingleAgentLoader, args: list[str]) -> None:
        """Run the launcher with ``args`` (argv without the program name).

        Raises:
            LauncherError: the arguments were rejected or the session failed.
        """
        opts = self._parser.parse_args(args)
        try:
            asyncio.run(self._run_console(loader.root_agent(), opts))
        except KeyboardInterrupt:
            # Ctrl-C during a turn; the runner was closed on the way out.
            print("\n\n👋 Goodbye!")
        except LauncherError:
            raise
        except Exception as e:
            raise LauncherError(str(e) or type(e).__name__) from e

    async def _run_console(self, agent: BaseAgent, opts: argparse.Namespace) -> None:
        session_service = InMemorySessionService()
        runner = self._runner_factory(agent, session_service)
        try:
            session = await session_service.create_session(
                app_name=agent.name,
                user_id=opts.user_id,
            )

            if opts.query:
                for text in opts.query:
                    print(f"\n🧑 You: {text}")
                    await self._send(runner, opts.user_id, session.id, text)
                return

            print("💬 Ask about the weather or the time in a city.")
            print("   (Type 'quit' to exit)\n")
            while True:
                try:
                    user_input = input("\n🧑 You: ").strip()
                except (EOFError, KeyboardInterrupt):
                    print("\n\n👋 Goodbye!")
                    break

                if user_input.lower() in QUIT_COMMANDS:
                    print("\n👋 Goodbye!")
                    break

                if not user_input:
                    continue

                await self._send(runner, opts.user_id, session.id, user_input)
        finally:
            await runner.close()

    async def _send(self, runner: Any, user_id: str, session_id: str, text: str) -> str:
        """Send one user turn and print tool calls and the final reply."""
        user_message = types.Content(role="user", parts=[types.Part(text=text)])

        final_response = ""
        async for event in runner.run_async(
            user_id=user_id,
            session_id=session_id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        if final_response:
            print(f"\n🤖 Agent: {final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")
        return final_response

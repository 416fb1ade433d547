import logging
from typing import Optional

from rich.console import Console

from . import ui
from .api import BedrockClient
from .config import Config
from .exceptions import CliHelpError, ExecutionError
from .executor import CommandExecutor
from .prompts import build_prompt
from .security import SafetyGate
from .system_info import SystemInfo, probe

logger = logging.getLogger(__name__)

EXIT_KEYWORD = "exit"


class InteractiveShell:
    """
    The read-translate-check-execute loop.

    Each line is either run as-is or, in AI mode, translated by the model and
    confirmed by the user first. Whatever command results goes through the
    safety gate once before it is executed.
    """

    def __init__(
        self,
        config: Config,
        console: Optional[Console] = None,
        client: Optional[BedrockClient] = None,
        executor: Optional[CommandExecutor] = None,
        gate: Optional[SafetyGate] = None,
        system_info: Optional[SystemInfo] = None,
    ):
        self.config = config
        self.console = console or Console()
        self.client = client or BedrockClient(config, console=self.console)
        self.executor = executor or CommandExecutor(shell=config.shell)
        self.gate = gate or SafetyGate(config)
        self.system_info = system_info or probe()

    def run(self) -> int:
        """Prompts until 'exit' or end of input. Returns the process exit code."""
        ui.display_welcome(self.console, self.config)

        while True:
            try:
                line = ui.read_command(self.console)
            except EOFError:
                logger.info("End of input, leaving the shell")
                break

            text = line.strip()
            if text == EXIT_KEYWORD:
                ui.display_goodbye(self.console)
                break
            if not text:
                continue

            self.handle_input(text)

        return 0

    def handle_input(self, text: str):
        """Runs one turn of the loop for a non-empty, stripped line."""
        command = self.resolve_command(text)
        if command is None:
            return

        allowed, reason = self.gate.check(command)
        if not allowed:
            ui.display_blocked(self.console, reason)
            return

        try:
            self.executor.execute_command(command)
        except ExecutionError as e:
            ui.display_command_failed(self.console, e)

    def resolve_command(self, text: str) -> Optional[str]:
        """
        Returns the command to run for a line of input, or None when there is
        nothing to run (AI failure or the user declined the suggestion).
        """
        if not self.config.ai:
            return text

        prompt = build_prompt(self.system_info.os_label, self.system_info.arch, text)
        try:
            suggestion = self.client.translate(prompt)
        except CliHelpError as e:
            logger.warning(f"Translation failed: {e}")
            ui.display_ai_error(self.console, e)
            return None

        ui.display_suggestion(self.console, suggestion)
        if not ui.confirm_execution(self.console):
            ui.display_skipped(self.console)
            return None
        return suggestion

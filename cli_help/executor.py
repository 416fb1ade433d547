import logging
import subprocess

from .exceptions import ExecutionError

# Configure logging
logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs shell commands with the terminal attached."""

    def __init__(self, shell: str = "bash"):
        self.shell = shell

    def execute_command(self, command: str) -> int:
        """
        Execute a command string through the shell.

        stdin, stdout and stderr are inherited from this process, so the
        command is fully interactive and its output is not captured.

        Args:
            command: The shell command (or multi-line script) to execute

        Returns:
            The exit status, which is always 0 when this returns

        Raises:
            ExecutionError: If the shell could not be started or the command exited non-zero
        """
        logger.info(f"Executing command: {command}")

        try:
            process = subprocess.run([self.shell, "-c", command])
        except OSError as e:
            logger.warning(f"Could not start {self.shell}: {e}")
            raise ExecutionError(f"could not start {self.shell}: {e}") from e

        if process.returncode != 0:
            logger.warning(f"Command failed with return code {process.returncode}: {command}")
            raise ExecutionError(f"exit status {process.returncode}", returncode=process.returncode)

        logger.info(f"Command executed successfully: {command}")
        return process.returncode

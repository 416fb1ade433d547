import logging
from typing import Tuple

from .config import Config

logger = logging.getLogger(__name__)

BLOCKED_MESSAGE = "'rm' commands are not allowed in SAFE MODE."


def is_allowed(command: str, unsafe_mode: bool) -> bool:
    """
    Checks a command string against the 'rm' denylist.

    This is a plain text match: the bare word "rm", a leading "rm ", or " rm "
    anywhere in the string. Path-qualified calls (/bin/rm), other separators
    (;rm, tabs) and substitutions are not detected.
    """
    if unsafe_mode:
        return True
    return not (command == "rm" or command.startswith("rm ") or " rm " in command)


class SafetyGate:
    """Vets every command before it reaches the executor."""

    def __init__(self, config: Config):
        self.unsafe_mode = config.unsafe

    def check(self, command: str) -> Tuple[bool, str]:
        """
        Returns:
            A tuple (is_allowed, reason).
        """
        if is_allowed(command, self.unsafe_mode):
            return True, "Command is allowed."
        logger.warning(f"Blocked command in safe mode: {command}")
        return False, BLOCKED_MESSAGE

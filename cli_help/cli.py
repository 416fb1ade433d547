import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from . import APP_AUTHOR, APP_NAME, __version__
from .config import Config
from .logger import setup_logging
from .shell import InteractiveShell
from .ui import display_mode_notices

logger = logging.getLogger(__name__)
console = Console()

DESCRIPTION = f"""
{APP_NAME} - AI-powered CLI helper tool
Author: {APP_AUTHOR}
Version: {__version__}

{APP_NAME} helps you translate natural language into CLI commands.
Safe mode (default) blocks dangerous commands like 'rm'.
Unsafe mode explicitly allows them.
AI mode uses Amazon Bedrock Anthropic Claude to suggest commands.
The AI automatically receives your OS and architecture to generate compatible commands.
"""


KNOWN_FLAGS = ("-h", "--help", "-v", "--version", "--unsafe", "--ai", "--verbose")


def select_flags(argv: List[str]) -> List[str]:
    """
    Keeps only arguments that exactly match a known flag.

    Anything else (unknown flags, positionals, "--ai=yes", "-vx") is dropped
    so it can never make argparse exit with an error.
    """
    return [arg for arg in argv if arg in KNOWN_FLAGS]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} v{__version__} by {APP_AUTHOR}",
        help="Show version info",
    )
    parser.add_argument("--unsafe", action="store_true",
                        help="Enable UNSAFE MODE (allows 'rm' commands, USE WITH CARE)")
    parser.add_argument("--ai", action="store_true",
                        help="Enable AI mode (translate natural language into CLI commands)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print raw AI response JSON (for debugging)")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Parses flags, builds the configuration and runs the interactive shell."""
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(select_flags(argv))

    config = Config.load(unsafe=args.unsafe, ai=args.ai, verbose=args.verbose)
    setup_logging(config)
    logger.info(f"Starting {APP_NAME} {__version__} with {config}")

    display_mode_notices(console, config)
    return InteractiveShell(config, console=console).run()

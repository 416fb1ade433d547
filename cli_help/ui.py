from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .config import Config

PROMPT_MARKER = "> "
CONFIRM_PROMPT = "Run this? (y/n): "


def display_mode_notices(console: Console, config: Config):
    """Announces each mode enabled on the command line."""
    if config.unsafe:
        console.print("[bold yellow]⚠️ UNSAFE MODE enabled! 'rm' commands are now allowed.[/bold yellow]")
    if config.ai:
        console.print(f"🤖 AI mode enabled! Using Bedrock model [cyan]{escape(config.model)}[/cyan] (Bearer token).")
    if config.verbose:
        console.print("🔍 Verbose mode: Raw AI responses will be printed.")


def display_welcome(console: Console, config: Config):
    """Displays the banner shown before the first prompt."""
    console.print(Panel(Text("Welcome to CLI Helper 🚀", justify="center"), border_style="blue"))
    if config.unsafe:
        console.print("[yellow]⚠️ Running in UNSAFE MODE. Dangerous commands are allowed.[/yellow]")
    else:
        console.print("[green]✅ Running in SAFE MODE. 'rm' commands are blocked.[/green]")
    if config.ai:
        console.print("🤖 AI Mode is ON: Type natural language and I'll translate to commands.")
    console.print("Type your command (or natural language request). Type 'exit' to quit.")


def read_command(console: Console) -> str:
    """Shows the prompt marker and reads one line. Raises EOFError at end of input."""
    return console.input(PROMPT_MARKER)


def display_suggestion(console: Console, command: str):
    console.print("🤖 Suggested command:")
    console.print(Text(command, style="cyan"))


def confirm_execution(console: Console) -> bool:
    """Ask user to confirm command execution. Only a literal 'y' counts as yes."""
    try:
        answer = console.input(CONFIRM_PROMPT)
    except EOFError:
        return False
    return answer.strip() == "y"


def display_skipped(console: Console):
    console.print("[red]❌ Skipped.[/red]")


def display_blocked(console: Console, reason: str):
    console.print(f"[bold red]❌ Error: {escape(reason)}[/bold red]")


def display_ai_error(console: Console, error: Exception):
    console.print(f"[bold red]❌ AI error: {escape(str(error))}[/bold red]")


def display_command_failed(console: Console, error: Exception):
    console.print(f"[yellow]⚠️ Command failed: {escape(str(error))}[/yellow]")


def display_raw_response(console: Console, body: str):
    """Echoes an unparsed inference response (verbose mode)."""
    console.print("📜 Raw AI response:")
    console.print(body, markup=False, highlight=False)


def display_goodbye(console: Console):
    console.print("Goodbye 👋")

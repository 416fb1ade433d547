COMMAND_ONLY_DIRECTIVE = """
Respond only with the shell command(s).
If multiple commands are needed, return them as a multi-line script.
Do NOT include explanations."""


def build_prompt(os_label: str, arch: str, user_text: str) -> str:
    """
    Builds the prompt for translating a natural language request into shell commands.

    Args:
        os_label: Human readable OS name, e.g. "Ubuntu 22.04.4 LTS".
        arch: Machine architecture, e.g. "x86_64".
        user_text: The request exactly as the user typed it.

    Returns:
        The system info line, the user text and the command-only directive.
    """
    system_info = f"System Info: OS={os_label} Arch={arch}\n"
    return system_info + user_text + COMMAND_ONLY_DIRECTIVE

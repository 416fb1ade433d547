"""
Interactive shell that runs commands directly or translates natural language into them.

In AI mode each request is sent to an Anthropic model on Amazon Bedrock, the suggested
command is shown for confirmation, and it is checked against a small denylist before
being handed to bash.
"""

APP_NAME = "cli-help"
APP_AUTHOR = "Pavithran KB"
__version__ = "0.5.2"

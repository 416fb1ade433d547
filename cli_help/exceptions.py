"""Custom exceptions for cli-help."""
from typing import Any, Optional


class CliHelpError(Exception):
    """Base exception for cli-help."""
    pass


class ConfigurationError(CliHelpError):
    """Raised when a required setting (such as the API credential) is missing."""

    def __init__(self, message: str, missing_key: str = ""):
        super().__init__(message)
        self.missing_key = missing_key


class TransportError(CliHelpError):
    """Raised when the inference endpoint cannot be reached."""
    pass


class RemoteError(CliHelpError):
    """Raised when the inference endpoint answers with a non-success status."""

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class FormatError(CliHelpError):
    """Raised when the inference response is not the shape we expect."""

    def __init__(self, message: str, payload: Optional[Any] = None):
        super().__init__(message)
        self.payload = payload


class ExecutionError(CliHelpError):
    """Raised when a shell command fails to launch or exits non-zero."""

    def __init__(self, message: str, returncode: int = -1):
        super().__init__(message)
        self.returncode = returncode

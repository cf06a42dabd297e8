"""Custom exception hierarchy for the FreshBooks Classic client."""

from typing import Optional

import click
from rich.console import Console


class FreshBooksError(click.ClickException):
    """Base exception for all FreshBooks Classic errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def show(self, file=None) -> None:
        """Display error with Rich formatting."""
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {self.format_message()}")

    def format_message(self) -> str:
        """Override in subclasses for custom formatting."""
        return self.message


class TransportError(FreshBooksError):
    """The HTTP exchange failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(TransportError):
    """The service rejected the request credentials."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your API token or OAuth credentials."


class NetworkError(TransportError):
    """Network connectivity issue."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your internet connection and try again."


class DecodeError(FreshBooksError):
    """Reply body is not well-formed XML or has an unexpected shape."""

    pass


class TimestampParseError(DecodeError):
    """Text matched none of the known date-time layouts."""

    def __init__(self, text: str):
        super().__init__(f"Unrecognized timestamp: {text!r}")
        self.text = text


class ServiceError(FreshBooksError):
    """The service answered with a non-empty <error> element."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return self.message

"""
trello-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 for every failure the CLI reports."""

    exit_code = 1


class ConfigurationError(CliError):
    """Missing TRELLO_KEY / TRELLO_TOKEN."""


class UsageError(CliError):
    """Missing required argument."""


class UnknownCommandError(UsageError):
    """Command name not in the command table."""


class ValidationError(CliError):
    """Malformed identifier. Message never contains the rejected value."""


class RequestError(CliError):
    """Base class for failures of a single outbound request."""


class RequestTimeoutError(RequestError):
    def __init__(self, timeout_ms):
        super().__init__(f"Request timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class NetworkError(RequestError):
    """DNS, refused connection, TLS and other transport failures."""


class ApiError(RequestError):
    """Raised for a received HTTP response with a non-2xx status."""

    def __init__(self, status, status_text):
        super().__init__(f"API error: {status} {status_text}")
        self.status = status
        self.status_text = status_text


class ParseError(RequestError):
    """Response body is not valid JSON (or exceeds the size limit)."""

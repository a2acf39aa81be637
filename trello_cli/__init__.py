"""trello-cli: CLI tool for reading Trello boards, lists, and cards."""

from trello_cli.client import TrelloClient
from trello_cli.config import VERSION, Credentials
from trello_cli.exceptions import (
    ApiError,
    CliError,
    ConfigurationError,
    NetworkError,
    ParseError,
    RequestError,
    RequestTimeoutError,
    UsageError,
    ValidationError,
)
from trello_cli.types import Board, BoardList, Card, SearchResult

__all__ = [
    "VERSION",
    "TrelloClient",
    "Credentials",
    "CliError",
    "ConfigurationError",
    "UsageError",
    "ValidationError",
    "RequestError",
    "RequestTimeoutError",
    "NetworkError",
    "ApiError",
    "ParseError",
    "Board",
    "BoardList",
    "Card",
    "SearchResult",
]

"""
TrelloClient: public Python API for reading Trello boards, lists and cards.

Single entry point for programmatic use; the CLI commands are thin wrappers.
All methods return the decoded JSON as plain dicts/lists (shapes in types.py).
"""

from __future__ import annotations

from typing import Any

from trello_cli import config
from trello_cli.api import request, validate_id
from trello_cli.types import Board, BoardList, Card


class TrelloClient:
    """Read-only Trello API client bound to one set of credentials."""

    def __init__(self, credentials: config.Credentials | None = None):
        self.credentials = credentials or config.load_credentials()

    def _get(self, path: str, query: dict[str, str] | None = None) -> Any:
        return request(self.credentials, path, query)

    def list_boards(self) -> list[Board]:
        """Boards the token's member belongs to."""
        return self._get("/members/me/boards")

    def list_lists(self, board_id: str) -> list[BoardList]:
        board_id = validate_id(board_id, "board-id")
        return self._get(f"/boards/{board_id}/lists")

    def list_cards(self, board_id: str) -> list[Card]:
        board_id = validate_id(board_id, "board-id")
        return self._get(f"/boards/{board_id}/cards")

    def get_card(self, card_id: str) -> Card:
        card_id = validate_id(card_id, "card-id")
        return self._get(f"/cards/{card_id}")

    def search_cards(self, query: str) -> list[Card]:
        """Full-text card search. *query* is free text and is not validated."""
        result = self._get("/search", {"query": query, "modelTypes": "cards"})
        return result.get("cards") or []

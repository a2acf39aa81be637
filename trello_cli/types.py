"""Typed response definitions for TrelloClient methods.

These TypedDicts document the shape of dicts returned by the Trello API.
They are optional; runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import TypedDict


class Board(TypedDict, total=False):
    id: str
    name: str
    url: str


class BoardList(TypedDict, total=False):
    """A list (column) on a board."""

    id: str
    name: str
    idBoard: str


class Card(TypedDict, total=False):
    id: str
    name: str
    idList: str
    url: str
    desc: str


class SearchResult(TypedDict, total=False):
    """Return shape of GET /search with modelTypes=cards."""

    cards: list[Card]

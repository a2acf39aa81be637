"""
Command implementations for trello-cli.
Each cmd_*() function receives a TrelloClient and the command's residual
arguments, and handles one CLI command.

Business logic lives in client.py (TrelloClient). These thin wrappers
handle argument presence, the client call, and formatter dispatch.
"""

from trello_cli.exceptions import UsageError
from trello_cli.formatters import (
    format_id_name_lines,
    format_search_results,
    pretty_print,
    print_lines,
)


def _require_arg(args, usage):
    """Return the first residual argument, or raise UsageError with *usage*."""
    if not args or not args[0]:
        raise UsageError(f"Usage: trello {usage}")
    return args[0]


# ---------------------------------------------------------------------------
# Read commands
# ---------------------------------------------------------------------------


def cmd_boards(client, args):
    print_lines(format_id_name_lines(client.list_boards()))


def cmd_lists(client, args):
    board_id = _require_arg(args, "lists <board-id>")
    print_lines(format_id_name_lines(client.list_lists(board_id)))


def cmd_cards(client, args):
    board_id = _require_arg(args, "cards <board-id>")
    print_lines(format_id_name_lines(client.list_cards(board_id)))


def cmd_card(client, args):
    card_id = _require_arg(args, "card <card-id>")
    pretty_print(client.get_card(card_id))


def cmd_search(client, args):
    query = _require_arg(args, "search <query>")
    print_lines(format_search_results(client.search_cards(query)))

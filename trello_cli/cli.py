"""
trello-cli: read Trello boards, lists and cards from the command line
"""

import enum
import sys

from trello_cli import config
from trello_cli.client import TrelloClient
from trello_cli.commands import cmd_boards, cmd_card, cmd_cards, cmd_lists, cmd_search
from trello_cli.exceptions import CliError, UnknownCommandError
from trello_cli.formatters import _sanitize_str

HELP_TEXT = """\
Usage: trello <command> [args]

Commands:
  boards              List all boards
  lists <board-id>    List all lists in a board
  cards <board-id>    List all cards in a board
  card <card-id>      Show card details (JSON)
  search <query>      Search cards by keyword
  help                Show this help

Environment:
  TRELLO_KEY          Trello API key
  TRELLO_TOKEN        Trello API token
  TRELLO_HTTP_LOG     Log HTTP requests to stderr (1/true/yes/on)
"""


class Command(enum.Enum):
    BOARDS = "boards"
    LISTS = "lists"
    CARDS = "cards"
    CARD = "card"
    SEARCH = "search"
    HELP = "help"


# ---------------------------------------------------------------------------
# Command resolution
# ---------------------------------------------------------------------------


def resolve_command(argv):
    """Split argv into (command name, residual args). No command means help."""
    if not argv:
        return "help", []
    return argv[0], list(argv[1:])


def parse_command(name):
    try:
        return Command(name)
    except ValueError:
        raise UnknownCommandError(f"Unknown command: {_sanitize_str(name)}") from None


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def cmd_help(client, args):
    print(HELP_TEXT, end="")


_HANDLERS = {
    Command.BOARDS: cmd_boards,
    Command.LISTS: cmd_lists,
    Command.CARDS: cmd_cards,
    Command.CARD: cmd_card,
    Command.SEARCH: cmd_search,
    Command.HELP: cmd_help,
}


def run(command, args, credentials):
    """Run one resolved command against a client bound to *credentials*."""
    handler = _HANDLERS[command]
    handler(TrelloClient(credentials), args)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if argv is None:
        argv = sys.argv[1:]

    try:
        credentials = config.load_credentials()
        name, args = resolve_command(argv)
        run(parse_command(name), args, credentials)
    except UnknownCommandError as e:
        print(e, file=sys.stderr)
        print(HELP_TEXT, end="")
        sys.exit(e.exit_code)
    except CliError as e:
        print(e, file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()

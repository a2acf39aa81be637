"""Output formatting for trello-cli (stdlib only)."""

import json
import re

NO_CARDS_FOUND = "No cards found"

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from terminal output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def format_id_name_lines(items):
    """One ``<id>\\t<name>`` line per item, in input order."""
    return [f"{item['id']}\t{_sanitize_str(item.get('name') or '')}" for item in items]


def format_search_results(cards):
    """Like format_id_name_lines, but an empty result is a single message line."""
    if not cards:
        return [NO_CARDS_FOUND]
    return format_id_name_lines(cards)


def print_lines(lines):
    for line in lines:
        print(line)

"""
Parser for MTG Arena deck lists.

Arena deck format:
    <quantity> <card name> (<set_code>) <collector_number>

Example:
    Deck
    4 Lightning Bolt (STA) 42
    20 Mountain (NEO) 290

    Sideboard
    2 Abrade (VOW) 139

Cards before any header belong to the main deck. A section header
(Deck, Commander, Companion, Sideboard) switches the current section.
A blank line switches to the sideboard, so lists exported without a
"Sideboard" header still split correctly.

This parser is STRICT: the first line that is not blank, not a header
and not a card entry aborts the parse.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from arenadeck.models.deck import Deck, DeckBuilder, Section
from arenadeck.models.deck_entry import ArenaDeckEntry
from arenadeck.models.failure import DeckSyntaxError

logger = logging.getLogger(__name__)

# Pattern: "4 Lightning Bolt (LEB) 163"
# Groups: (quantity, card reference)
DECK_ENTRY_PATTERN = re.compile(r"^(\d+)\s+(.*)$", re.ASCII)

# Byte-order marks some clipboard exports leave at line start
BYTE_ORDER_MARKS = "\ufeff\ufffe"

# Largest count a deck entry may carry
MAX_ENTRY_COUNT = 2**31 - 1


def read_entries(lines: Iterable[str]) -> Deck[ArenaDeckEntry]:
    """
    Read deck lines into an unresolved deck.

    Args:
        lines: Deck list lines, with or without line terminators

    Returns:
        Deck of ArenaDeckEntry references

    Raises:
        DeckSyntaxError: On the first line that is not a valid entry
    """
    builder: DeckBuilder[ArenaDeckEntry] = DeckBuilder()
    current_section = Section.MAIN_DECK

    for raw_line in lines:
        line = raw_line.lstrip(BYTE_ORDER_MARKS).rstrip()

        if not line:
            current_section = Section.SIDEBOARD
            continue

        section = Section.from_label(line)
        if section is not None:
            current_section = section
            continue

        match = DECK_ENTRY_PATTERN.match(line)
        if not match:
            raise DeckSyntaxError(line)

        count_str = match.group(1).lstrip("0") or "0"
        if len(count_str) > len(str(MAX_ENTRY_COUNT)) or int(count_str) > MAX_ENTRY_COUNT:
            raise DeckSyntaxError(line, reason="Card count out of range")
        count = int(count_str)

        entry_str = match.group(2)
        entry = ArenaDeckEntry.parse(entry_str)
        if entry is None:
            raise DeckSyntaxError(entry_str, reason="Invalid Arena deck syntax")

        builder.add(current_section, entry, count)

    deck = builder.build()
    logger.debug(
        "Read Arena deck: %s",
        ", ".join(f"{s.label}={deck.count(s)}" for s in deck.sections()),
    )
    return deck


def parse_arena_deck(text: str) -> Deck[ArenaDeckEntry]:
    """
    Parse Arena deck text into an unresolved deck.

    Args:
        text: Raw deck list text (clipboard paste or file contents)

    Returns:
        Deck of ArenaDeckEntry references. Empty deck for empty text.
    """
    # Break lines the way a text stream does: on \n, \r and \r\n only
    return read_entries(io.StringIO(text, newline=None))


def read_arena_deck(stream: TextIO) -> Deck[ArenaDeckEntry]:
    """
    Read a deck from a text stream.

    The stream is closed when this returns or raises.
    """
    with stream:
        return read_entries(stream)


def read_arena_deck_file(path: Path) -> Deck[ArenaDeckEntry]:
    """Read a deck list file (UTF-8)."""
    return read_arena_deck(open(path, encoding="utf-8"))

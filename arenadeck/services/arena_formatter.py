"""
Arena Deck Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Renders a resolved deck as Arena import text, the inverse of the parser:

    Deck
    4 Lightning Bolt (STA) 42
    20 Mountain (NEO) 290

    Sideboard
    2 Abrade (VOW) 139

Sections are written in canonical order, empty sections are omitted, and
a single blank line separates consecutive sections.
"""

from __future__ import annotations

from typing import TextIO

from arenadeck.models.card import ArenaCard
from arenadeck.models.deck import Deck
from arenadeck.services.arena_order import sort_deck


def write_deck(deck: Deck[ArenaCard], sort_entries: bool = True) -> str:
    """
    Format a resolved deck as Arena import text.

    Args:
        deck: Resolved deck
        sort_entries: Order each section by deck entry order. Pass False to
            keep the deck's stored order (e.g. after sideboard prioritization).

    Returns:
        Arena format text, one newline-terminated line per header or entry
    """
    if sort_entries:
        deck = sort_deck(deck)

    blocks: list[str] = []
    for section, entries in deck.items():
        lines = [section.label]
        lines.extend(_format_card_line(printing, count) for printing, count in entries)
        blocks.append("".join(f"{line}\n" for line in lines))

    return "\n".join(blocks)


def write_deck_to(stream: TextIO, deck: Deck[ArenaCard], sort_entries: bool = True) -> None:
    """Write a resolved deck to a text stream. The stream is left open."""
    stream.write(write_deck(deck, sort_entries=sort_entries))


def _format_card_line(printing: ArenaCard, count: int) -> str:
    """Format a single card line in Arena format."""
    return f"{count} {printing.deck_entry.render()}"

"""
End-to-end Arena deck normalization.

    Raw Text
       │  parse_arena_deck
       ▼
    Deck[ArenaDeckEntry]
       │  resolve_deck (catalog)
       ▼
    Deck[ArenaCard] ── sort_deck ── prioritize_bo1_sideboard (optional)
       │  write_deck
       ▼
    Arena Text

The deck is sorted before prioritization so the prioritized sideboard
order is the one written out.
"""

import logging

from arenadeck.parsers.arena_deck import parse_arena_deck
from arenadeck.services.arena_formatter import write_deck
from arenadeck.services.arena_order import sort_deck
from arenadeck.services.card_catalog import CardCatalog
from arenadeck.services.deck_resolver import resolve_deck
from arenadeck.services.sideboard_prioritizer import prioritize_bo1_sideboard

logger = logging.getLogger(__name__)


def normalize_arena_deck(text: str, catalog: CardCatalog, prioritize: bool = True) -> str:
    """
    Parse, resolve and re-emit an Arena deck list in canonical form.

    Args:
        text: Raw Arena deck text
        catalog: Catalog to resolve card references against
        prioritize: Move best-of-one significant cards to the front of the sideboard

    Returns:
        Canonical Arena deck text

    Raises:
        DeckSyntaxError: If a line is malformed
        UnrecognizedCardError: If a card is not in the catalog
    """
    deck = sort_deck(resolve_deck(parse_arena_deck(text), catalog))
    if prioritize:
        deck = prioritize_bo1_sideboard(deck)
    logger.debug("Normalized deck with %d cards", deck.total())
    return write_deck(deck, sort_entries=False)

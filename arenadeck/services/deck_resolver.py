"""
Deck Resolution Service.

Resolves a deck of raw Arena card references to concrete printings.

INVARIANTS:
1. Resolution is read-only against the catalog
2. The first unresolved reference is TERMINAL (UnrecognizedCardError)
3. No partial deck is ever returned
4. Counts and sections are preserved exactly
"""

import logging
from typing import TextIO

from arenadeck.models.card import ArenaCard
from arenadeck.models.deck import Deck
from arenadeck.models.deck_entry import ArenaDeckEntry
from arenadeck.models.failure import UnrecognizedCardError
from arenadeck.parsers.arena_deck import read_arena_deck
from arenadeck.services.card_catalog import CardCatalog

logger = logging.getLogger(__name__)


def resolve_deck(deck: Deck[ArenaDeckEntry], catalog: CardCatalog) -> Deck[ArenaCard]:
    """
    Resolve every card reference in a deck.

    Args:
        deck: Unresolved deck from the parser
        catalog: Catalog to look references up in

    Returns:
        Deck of resolved printings with the same counts and sections

    Raises:
        UnrecognizedCardError: If any reference has no match in the catalog
    """

    def lookup(entry: ArenaDeckEntry) -> ArenaCard:
        printing = catalog.lookup(entry)
        if printing is None:
            logger.warning("Unrecognized Arena card: %s", entry)
            raise UnrecognizedCardError(entry)
        return printing

    resolved = deck.transform(lookup)
    logger.info("Resolved %d cards", resolved.total())
    return resolved


def read_deck(stream: TextIO, catalog: CardCatalog) -> Deck[ArenaCard]:
    """
    Read and resolve a deck from a text stream.

    The stream is closed before this returns or raises.
    """
    return resolve_deck(read_arena_deck(stream), catalog)

from arenadeck.services.arena_formatter import write_deck, write_deck_to
from arenadeck.services.arena_order import (
    collection_view_key,
    deck_builder_key,
    deck_entry_key,
    sort_deck,
)
from arenadeck.services.card_catalog import (
    CardCatalog,
    ScryfallCatalog,
    get_card_catalog,
    load_card_catalog,
)
from arenadeck.services.deck_pipeline import normalize_arena_deck
from arenadeck.services.deck_resolver import read_deck, resolve_deck
from arenadeck.services.sideboard_prioritizer import (
    is_significant_from_sideboard,
    prioritize_bo1_sideboard,
)

__all__ = [
    "CardCatalog",
    "ScryfallCatalog",
    "collection_view_key",
    "deck_builder_key",
    "deck_entry_key",
    "get_card_catalog",
    "is_significant_from_sideboard",
    "load_card_catalog",
    "normalize_arena_deck",
    "prioritize_bo1_sideboard",
    "read_deck",
    "resolve_deck",
    "sort_deck",
    "write_deck",
    "write_deck_to",
]

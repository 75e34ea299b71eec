from arenadeck.models.card import (
    COLOR_ORDER,
    ArenaCard,
    Card,
    CardFace,
    TypeLine,
    color_sort_key,
)
from arenadeck.models.deck import Deck, DeckBuilder, Section
from arenadeck.models.deck_entry import ArenaDeckEntry
from arenadeck.models.failure import (
    DeckDataError,
    DeckSyntaxError,
    FailureDetail,
    FailureKind,
    KnownError,
    UnrecognizedCardError,
)

__all__ = [
    "COLOR_ORDER",
    "ArenaCard",
    "ArenaDeckEntry",
    "Card",
    "CardFace",
    "Deck",
    "DeckBuilder",
    "DeckDataError",
    "DeckSyntaxError",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "Section",
    "TypeLine",
    "UnrecognizedCardError",
    "color_sort_key",
]

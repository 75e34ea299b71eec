"""
Arena display ordering.

Sort keys reproducing the orders Arena shows cards in:

- deck_builder_key: cards in the deck builder (nonlands first, then mana
  value, then color, then name)
- collection_view_key: printings in the collection view (color first)
- deck_entry_key: printings in a deck list (deck builder order, then printing)

Every key ends in a printing or name component, so the orders are total.
"""

from arenadeck.models.card import ArenaCard, Card, color_sort_key
from arenadeck.models.deck import Deck, DeckBuilder


def deck_builder_key(card: Card) -> tuple:
    """Arena deck builder order for cards."""
    return (
        card.is_land,
        card.mana_value,
        color_sort_key(card.deck_builder_colors),
        card.main_name,
    )


def collection_view_key(printing: ArenaCard) -> tuple:
    """Arena collection view order for printings."""
    card = printing.card
    return (
        color_sort_key(card.deck_builder_colors),
        card.is_land,
        card.mana_value,
        card.main_name,
        printing.printing_key,
    )


def deck_entry_key(printing: ArenaCard) -> tuple:
    """Order for deck list entries: deck builder order, ties broken by printing."""
    return (deck_builder_key(printing.card), printing.printing_key)


def sort_deck(deck: Deck[ArenaCard]) -> Deck[ArenaCard]:
    """New deck with every section in deck entry order."""
    builder: DeckBuilder[ArenaCard] = DeckBuilder()
    for section, entries in deck.items():
        for printing, count in sorted(entries, key=lambda e: deck_entry_key(e[0])):
            builder.add(section, printing, count)
    return builder.build()

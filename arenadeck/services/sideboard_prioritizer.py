"""
Best-of-one sideboard prioritization.

In a best-of-one match Arena shows only the first few sideboard cards
without scrolling. Some sideboard cards matter even without sideboarding:
Lessons (fetched by "learn") and cards that fetch a card with their own
name "from outside the game". Those are moved to the front of the
sideboard, provided they all fit in the visible slots.

Companion cards occupy visible slots too.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from arenadeck.config import BO1_SIDEBOARD_SIZE
from arenadeck.models.card import Card
from arenadeck.models.deck import Deck, Section

logger = logging.getLogger(__name__)

# Subtype of cards fetched by the "learn" mechanic
LESSON_SUBTYPE = "Lesson"

# With this card in the main deck, sideboard creatures can be fetched in game
GRIZZLED_HUNTMASTER = "Grizzled Huntmaster"


class CardIdentity(Protocol):
    @property
    def card(self) -> Card: ...


C = TypeVar("C", bound=CardIdentity)


def is_significant_from_sideboard(identity: CardIdentity) -> bool:
    """True for sideboard cards that can be used in a best-of-one match."""
    card = identity.card
    if card.main_type_line.has_subtype(LESSON_SUBTYPE):
        return True
    fetch_text = f"named {card.main_name} from outside the game"
    return any(fetch_text in face.oracle_text for face in card.faces)


def is_creature(identity: CardIdentity) -> bool:
    return identity.card.main_type_line.is_type("Creature")


def either(first: Callable[[C], bool], second: Callable[[C], bool]) -> Callable[[C], bool]:
    """Logical OR of two predicates."""
    return lambda c: first(c) or second(c)


def prioritize_bo1_sideboard(
    deck: Deck[C],
    significance: Callable[[C], bool] = is_significant_from_sideboard,
) -> Deck[C]:
    """
    Move significant sideboard cards to the front of the sideboard.

    The sideboard is reordered only if at least one copy is significant,
    every significant copy fits in the visible slots, and not every copy
    is significant. Otherwise the deck is returned as-is.

    Args:
        deck: Resolved deck
        significance: Predicate selecting the cards to move forward

    Returns:
        A new deck with a reordered sideboard, or the input deck
    """
    sideboard = deck.entries(Section.SIDEBOARD)

    has_huntmaster = any(
        c.card.main_name == GRIZZLED_HUNTMASTER for c in deck.elements(Section.MAIN_DECK)
    )
    predicate = either(significance, is_creature) if has_huntmaster else significance

    significant = {element for element, _ in sideboard if predicate(element)}
    size = sum(count for element, count in sideboard if element in significant)
    capacity = BO1_SIDEBOARD_SIZE - deck.count(Section.COMPANION)

    if size == 0 or size > capacity or size == deck.count(Section.SIDEBOARD):
        logger.debug(
            "Sideboard order kept: %d significant of %d, capacity %d",
            size,
            deck.count(Section.SIDEBOARD),
            capacity,
        )
        return deck

    logger.debug("Moving %d significant sideboard cards forward", size)
    builder = deck.to_builder()
    builder.clear(Section.SIDEBOARD)
    for element, count in sorted(sideboard, key=lambda e: e[0] not in significant):
        builder.add(Section.SIDEBOARD, element, count)
    return builder.build()

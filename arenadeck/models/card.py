"""
Resolved card models.

These are the card identities a deck list resolves to. Card data is owned
by the catalog; a deck only holds references to these frozen values.

INVARIANTS:
- All models are frozen (immutable after construction)
- Card is oracle-level data, shared by every printing
- ArenaCard is one concrete Arena printing of a Card
"""

import string
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from arenadeck.models.deck_entry import ArenaDeckEntry

# Fixed color alphabet, in deck-builder order
COLOR_ORDER = "WUBRG"

# Layouts whose Arena name is the full "A // B" name rather than the front face
SPLIT_LAYOUTS: frozenset[str] = frozenset({"split", "aftermath"})


def color_sort_key(colors: Iterable[str]) -> tuple[bool, int, tuple[int, ...]]:
    """
    Sort key for a color set, colorless last.

    Non-empty sets sort by number of colors, then by WUBRG position of
    their members. The empty set sorts after every non-empty set.
    """
    positions = tuple(sorted(COLOR_ORDER.index(c) for c in set(colors) if c in COLOR_ORDER))
    return (not positions, len(positions), positions)


@dataclass(frozen=True, slots=True)
class TypeLine:
    """
    A parsed type line, e.g. "Legendary Creature — Elf Druid".

    Attributes:
        types: Supertypes and card types, left of the dash
        subtypes: Subtypes, right of the dash
    """

    types: tuple[str, ...]
    subtypes: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "TypeLine":
        if "—" in text:
            left, right = text.split("—", 1)
        elif " - " in text:
            left, right = text.split(" - ", 1)
        else:
            left, right = text, ""
        return cls(types=tuple(left.split()), subtypes=tuple(right.split()))

    def is_type(self, name: str) -> bool:
        return name in self.types

    def has_subtype(self, name: str) -> bool:
        return name in self.subtypes


@dataclass(frozen=True, slots=True)
class CardFace:
    """One face of a card. Single-faced cards have exactly one."""

    name: str
    type_line: str
    oracle_text: str = ""


@dataclass(frozen=True, slots=True)
class Card:
    """
    Oracle-level card data.

    Attributes:
        name: Full card name (e.g., "Fire // Ice")
        faces: Card faces, front face first
        mana_value: Converted mana cost
        colors: Color letters of the card
        color_identity: Color identity letters
        layout: Scryfall layout (e.g., "normal", "split", "transform")
    """

    name: str
    faces: tuple[CardFace, ...]
    mana_value: float = 0.0
    colors: frozenset[str] = frozenset()
    color_identity: frozenset[str] = frozenset()
    layout: str = "normal"

    @property
    def main_name(self) -> str:
        """Name Arena uses for this card: the front face, or the full name of a split card."""
        if self.layout in SPLIT_LAYOUTS or not self.faces:
            return self.name
        return self.faces[0].name

    @property
    def main_type_line(self) -> TypeLine:
        if not self.faces:
            return TypeLine(types=())
        return TypeLine.parse(self.faces[0].type_line)

    @property
    def is_land(self) -> bool:
        return self.main_type_line.is_type("Land")

    @property
    def deck_builder_colors(self) -> frozenset[str]:
        """The card's colors, or its color identity when it has none (e.g. lands)."""
        return self.colors if self.colors else self.color_identity


def collector_number_key(collector_number: str) -> tuple[bool, int, str]:
    """Order collector numbers numerically on their digit prefix ("9" < "10" < "10a")."""
    suffix = collector_number.lstrip(string.digits)
    digits = collector_number[: len(collector_number) - len(suffix)]
    return (not digits, int(digits) if digits else 0, suffix)


@dataclass(frozen=True, slots=True)
class ArenaCard:
    """
    A specific Arena printing of a card.

    Attributes:
        card: The oracle-level card
        set_code: Set code as Arena writes it (e.g., "DMU")
        collector_number: Collector number within set
        released_at: Release date of the printing, if known
        arena_id: Arena's internal card ID, if known
    """

    card: Card
    set_code: str
    collector_number: str
    released_at: date | None = None
    arena_id: int | None = None

    @property
    def deck_entry(self) -> ArenaDeckEntry:
        """The card reference Arena writes for this printing."""
        return ArenaDeckEntry(
            name=self.card.main_name,
            set_code=self.set_code,
            collector_number=self.collector_number,
        )

    @property
    def printing_key(self) -> tuple:
        """Natural order over printings, independent of card attributes."""
        return (
            self.released_at is None,
            self.released_at or date.min,
            self.set_code,
            collector_number_key(self.collector_number),
            self.arena_id is None,
            self.arena_id or 0,
            self.card.name,
        )

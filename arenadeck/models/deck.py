"""
Deck model.

A Deck is an immutable collection of card copies partitioned into
sections. It is generic over the card identity: a deck read from text
holds ArenaDeckEntry references, a resolved deck holds ArenaCard printings.

INVARIANTS:
- A Deck never changes after construction
- Each section is a multiset: distinct elements with positive counts
- Insertion order of a section is kept for output, but equality ignores it
- Changes are made on a DeckBuilder, which produces a new Deck
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Generic, TypeVar

C = TypeVar("C", bound=Hashable)
D = TypeVar("D", bound=Hashable)


class Section(Enum):
    """
    Deck sections, in serialization order.

    Each value is the label Arena uses as a section header.
    """

    MAIN_DECK = "Deck"
    COMMANDER = "Commander"
    COMPANION = "Companion"
    SIDEBOARD = "Sideboard"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Section | None:
        """Exact, case-sensitive lookup of a section header."""
        try:
            return cls(label)
        except ValueError:
            return None


class Deck(Generic[C]):
    """
    An immutable deck.

    Usage:
        deck = DeckBuilder().add(Section.MAIN_DECK, card, 4).build()
        deck.count(Section.MAIN_DECK)  # 4
    """

    __slots__ = ("_sections",)

    def __init__(self, sections: Mapping[Section, Iterable[tuple[C, int]]] | None = None) -> None:
        normalized: dict[Section, tuple[tuple[C, int], ...]] = {}
        for section in Section:
            counts: dict[C, int] = {}
            for element, count in (sections or {}).get(section, ()):
                if count < 0:
                    raise ValueError(f"Negative count {count} for {element!r} in {section.label}")
                if count:
                    counts[element] = counts.get(element, 0) + count
            if counts:
                normalized[section] = tuple(counts.items())
        self._sections = normalized

    def entries(self, section: Section) -> tuple[tuple[C, int], ...]:
        """Distinct elements of a section with their counts, in stored order."""
        return self._sections.get(section, ())

    def elements(self, section: Section) -> tuple[C, ...]:
        return tuple(element for element, _ in self.entries(section))

    def count(self, section: Section) -> int:
        """Number of physical copies in a section."""
        return sum(count for _, count in self.entries(section))

    def total(self) -> int:
        return sum(self.count(section) for section in self._sections)

    def sections(self) -> list[Section]:
        """Non-empty sections, in serialization order."""
        return [section for section in Section if section in self._sections]

    def items(self) -> Iterator[tuple[Section, tuple[tuple[C, int], ...]]]:
        for section in self.sections():
            yield section, self._sections[section]

    @property
    def is_empty(self) -> bool:
        return not self._sections

    def transform(self, fn: Callable[[C], D]) -> Deck[D]:
        """
        Map every element through fn, keeping counts and sections.

        Elements that map to the same value have their counts merged.
        """
        builder: DeckBuilder[D] = DeckBuilder()
        for section, entries in self.items():
            for element, count in entries:
                builder.add(section, fn(element), count)
        return builder.build()

    def to_builder(self) -> DeckBuilder[C]:
        """Fresh mutable copy of this deck."""
        return DeckBuilder.from_deck(self)

    def _as_dicts(self) -> dict[Section, dict[C, int]]:
        return {section: dict(entries) for section, entries in self._sections.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._as_dicts() == other._as_dicts()

    def __hash__(self) -> int:
        return hash(
            frozenset(
                (section, frozenset(entries)) for section, entries in self._sections.items()
            )
        )

    def __repr__(self) -> str:
        parts = ", ".join(f"{section.label}={list(entries)!r}" for section, entries in self.items())
        return f"Deck({parts})"


class DeckBuilder(Generic[C]):
    """
    Mutable accumulator of card counts per section.

    Produces an immutable Deck with build(). A builder can be pre-populated
    from an existing Deck to create a modified copy.
    """

    def __init__(self) -> None:
        self._sections: dict[Section, Counter[C]] = {section: Counter() for section in Section}

    @classmethod
    def from_deck(cls, deck: Deck[C]) -> DeckBuilder[C]:
        builder: DeckBuilder[C] = cls()
        for section, entries in deck.items():
            for element, count in entries:
                builder.add(section, element, count)
        return builder

    def add(self, section: Section, element: C, count: int = 1) -> DeckBuilder[C]:
        """Add count copies of element to a section."""
        if count < 0:
            raise ValueError(f"Cannot add a negative count: {count}")
        if count:
            self._sections[section][element] += count
        return self

    def get(self, section: Section) -> Counter[C]:
        """The live, mutable multiset of a section."""
        return self._sections[section]

    def clear(self, section: Section) -> DeckBuilder[C]:
        self._sections[section].clear()
        return self

    def build(self) -> Deck[C]:
        return Deck({section: counts.items() for section, counts in self._sections.items()})

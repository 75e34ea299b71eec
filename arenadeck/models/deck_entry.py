"""
Arena card reference grammar.

A card reference is the part of a deck line after the count:
    <card name> (<set_code>) <collector_number>
or just
    <card name>

Example:
    Lightning Bolt (STA) 42
    Fire // Ice (MH2) 290
    Mountain
"""

import re
from dataclasses import dataclass

# Pattern: "Lightning Bolt (LEB) 163" or "Card (SET) 290a"
# Groups: (card_name, set_code, collector_number)
ENTRY_FULL_PATTERN = re.compile(r"^(\S.*?)\s+\(([A-Za-z0-9]+)\)\s+(\S+)$")

# Pattern: "Lightning Bolt" (no set info)
ENTRY_SIMPLE_PATTERN = re.compile(r"^(\S(?:.*\S)?)$")


@dataclass(frozen=True, slots=True)
class ArenaDeckEntry:
    """
    An unresolved card reference from an Arena deck list.

    This is UNTRUSTED data directly from user input. It names a card but
    says nothing about whether the card exists; the catalog decides that.

    Attributes:
        name: Card name exactly as it appears in the deck list
        set_code: Set code (e.g., "DMU"), or None for a bare name
        collector_number: Collector number within set, or None for a bare name
    """

    name: str
    set_code: str | None = None
    collector_number: str | None = None

    def __post_init__(self) -> None:
        if (self.set_code is None) != (self.collector_number is None):
            raise ValueError("set_code and collector_number must be given together")

    @property
    def has_printing(self) -> bool:
        return self.set_code is not None

    @classmethod
    def parse(cls, text: str) -> "ArenaDeckEntry | None":
        """
        Parse a card reference.

        Returns None if the text is not a valid reference.
        """
        match = ENTRY_FULL_PATTERN.match(text)
        if match:
            name, set_code, collector_number = match.groups()
            return cls(name=name, set_code=set_code, collector_number=collector_number)

        match = ENTRY_SIMPLE_PATTERN.match(text)
        if match:
            return cls(name=match.group(1))

        return None

    def render(self) -> str:
        """Render in Arena format. Inverse of parse()."""
        if self.has_printing:
            return f"{self.name} ({self.set_code}) {self.collector_number}"
        return self.name

    def __str__(self) -> str:
        return self.render()

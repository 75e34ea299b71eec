from collections.abc import Callable
from typing import Any

import pytest

from arenadeck.models.card import ArenaCard, Card, CardFace
from arenadeck.services.card_catalog import ScryfallCatalog


@pytest.fixture
def sample_scryfall_cards() -> list[dict[str, Any]]:
    """Scryfall-like card objects for testing."""
    return [
        {
            "oracle_id": "oracle-bolt",
            "name": "Lightning Bolt",
            "layout": "normal",
            "cmc": 1.0,
            "type_line": "Instant",
            "oracle_text": "Lightning Bolt deals 3 damage to any target.",
            "colors": ["R"],
            "color_identity": ["R"],
            "set": "sta",
            "collector_number": "42",
            "released_at": "2021-04-23",
            "arena_id": 75476,
            "games": ["arena", "paper", "mtgo"],
        },
        {
            "oracle_id": "oracle-bolt",
            "name": "Lightning Bolt",
            "layout": "normal",
            "cmc": 1.0,
            "type_line": "Instant",
            "oracle_text": "Lightning Bolt deals 3 damage to any target.",
            "colors": ["R"],
            "color_identity": ["R"],
            "set": "2xm",
            "collector_number": "141",
            "released_at": "2020-08-07",
            "games": ["paper", "mtgo"],
        },
        {
            "oracle_id": "oracle-swiftspear",
            "name": "Monastery Swiftspear",
            "layout": "normal",
            "cmc": 1.0,
            "type_line": "Creature — Human Monk",
            "oracle_text": "Haste\nProwess",
            "colors": ["R"],
            "color_identity": ["R"],
            "set": "bro",
            "collector_number": "144",
            "released_at": "2022-11-18",
            "games": ["arena", "paper"],
        },
        {
            "oracle_id": "oracle-mountain",
            "name": "Mountain",
            "layout": "normal",
            "cmc": 0.0,
            "type_line": "Basic Land — Mountain",
            "oracle_text": "({T}: Add {R}.)",
            "colors": [],
            "color_identity": ["R"],
            "set": "neo",
            "collector_number": "290",
            "released_at": "2022-02-18",
            "games": ["arena", "paper"],
        },
        {
            "oracle_id": "oracle-abrade",
            "name": "Abrade",
            "layout": "normal",
            "cmc": 2.0,
            "type_line": "Instant",
            "oracle_text": "Choose one —\n• Abrade deals 3 damage to target creature.",
            "colors": ["R"],
            "color_identity": ["R"],
            "set": "vow",
            "collector_number": "139",
            "released_at": "2021-11-19",
            "games": ["arena", "paper"],
        },
        {
            "oracle_id": "oracle-delver",
            "name": "Delver of Secrets // Insectile Aberration",
            "layout": "transform",
            "cmc": 1.0,
            "type_line": "Creature — Human Wizard // Creature — Human Insect",
            "color_identity": ["U"],
            "card_faces": [
                {
                    "name": "Delver of Secrets",
                    "type_line": "Creature — Human Wizard",
                    "oracle_text": "At the beginning of your upkeep, look at the top card.",
                    "colors": ["U"],
                },
                {
                    "name": "Insectile Aberration",
                    "type_line": "Creature — Human Insect",
                    "oracle_text": "Flying",
                    "colors": ["U"],
                },
            ],
            "set": "mid",
            "collector_number": "47",
            "released_at": "2021-09-24",
            "games": ["arena", "paper"],
        },
        {
            "oracle_id": "oracle-fire-ice",
            "name": "Fire // Ice",
            "layout": "split",
            "cmc": 4.0,
            "type_line": "Instant // Instant",
            "colors": ["U", "R"],
            "color_identity": ["U", "R"],
            "card_faces": [
                {
                    "name": "Fire",
                    "type_line": "Instant",
                    "oracle_text": "Fire deals 2 damage divided as you choose.",
                },
                {
                    "name": "Ice",
                    "type_line": "Instant",
                    "oracle_text": "Tap target permanent.\nDraw a card.",
                },
            ],
            "set": "mh2",
            "collector_number": "290",
            "released_at": "2021-06-18",
            "games": ["paper", "mtgo"],
        },
        {
            "oracle_id": "oracle-env-sci",
            "name": "Environmental Sciences",
            "layout": "normal",
            "cmc": 2.0,
            "type_line": "Sorcery — Lesson",
            "oracle_text": "Search your library for a basic land card.",
            "colors": [],
            "color_identity": [],
            "set": "stx",
            "collector_number": "1",
            "released_at": "2021-04-23",
            "games": ["arena", "paper"],
        },
    ]


@pytest.fixture
def catalog(sample_scryfall_cards: list[dict[str, Any]]) -> ScryfallCatalog:
    """Catalog built from the sample Scryfall cards."""
    return ScryfallCatalog.from_scryfall(sample_scryfall_cards)


@pytest.fixture
def sample_arena_deck() -> str:
    """Sample Arena deck export for testing."""
    return """Deck
4 Lightning Bolt (STA) 42
4 Monastery Swiftspear (BRO) 144
20 Mountain (NEO) 290

Sideboard
2 Abrade (VOW) 139"""


@pytest.fixture
def make_printing() -> Callable[..., ArenaCard]:
    """Factory for single-faced Arena printings."""

    def _make(
        name: str,
        type_line: str = "Instant",
        mana_value: float = 1.0,
        colors: str = "",
        color_identity: str | None = None,
        oracle_text: str = "",
        set_code: str = "TST",
        collector_number: str = "1",
    ) -> ArenaCard:
        card = Card(
            name=name,
            faces=(CardFace(name=name, type_line=type_line, oracle_text=oracle_text),),
            mana_value=mana_value,
            colors=frozenset(colors),
            color_identity=frozenset(colors if color_identity is None else color_identity),
        )
        return ArenaCard(card=card, set_code=set_code, collector_number=collector_number)

    return _make

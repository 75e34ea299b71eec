"""
Card catalog service.

Resolves Arena card references to printings, backed by Scryfall bulk data.
Downloads Scryfall bulk data reduced to Arena printings, then loads and
caches it.
"""

import json
import logging
from collections.abc import Iterable
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import httpx

from arenadeck.config import settings
from arenadeck.models.card import ArenaCard, Card, CardFace
from arenadeck.models.deck_entry import ArenaDeckEntry

logger = logging.getLogger(__name__)

SCRYFALL_BULK_API = "https://api.scryfall.com/bulk-data"


class CardCatalog(Protocol):
    """Anything that can resolve a card reference to a printing."""

    def lookup(self, entry: ArenaDeckEntry) -> ArenaCard | None: ...


def card_from_scryfall(data: dict[str, Any]) -> Card:
    """Build oracle-level card data from a Scryfall card object."""
    raw_faces = data.get("card_faces") or [data]
    faces = tuple(
        CardFace(
            name=str(face.get("name", data["name"])),
            type_line=str(face.get("type_line", data.get("type_line", ""))),
            oracle_text=str(face.get("oracle_text", "")),
        )
        for face in raw_faces
    )

    # Double-faced cards carry colors per face only
    colors = data.get("colors")
    if colors is None:
        colors = raw_faces[0].get("colors", [])

    return Card(
        name=str(data["name"]),
        faces=faces,
        mana_value=float(data.get("cmc", 0.0)),
        colors=frozenset(colors),
        color_identity=frozenset(data.get("color_identity", [])),
        layout=str(data.get("layout", "normal")),
    )


def printing_from_scryfall(data: dict[str, Any], card: Card | None = None) -> ArenaCard:
    """Build an Arena printing from a Scryfall card object."""
    released_at = data.get("released_at")
    return ArenaCard(
        card=card if card is not None else card_from_scryfall(data),
        set_code=str(data.get("set", "")).upper(),
        collector_number=str(data.get("collector_number", "")),
        released_at=date.fromisoformat(released_at) if released_at else None,
        arena_id=data.get("arena_id"),
    )


class ScryfallCatalog:
    """
    In-memory catalog of Arena printings.

    Lookup precedence:
        1. Exact printing: name, set code and collector number
        2. First loaded printing of the name in that set
        3. First loaded printing of the name

    Names are indexed by both the full name ("Delver of Secrets // Insectile
    Aberration") and the name Arena uses ("Delver of Secrets").
    Set codes compare case-insensitively.
    """

    def __init__(self, printings: Iterable[ArenaCard] = ()) -> None:
        self._by_printing: dict[tuple[str, str, str], ArenaCard] = {}
        self._by_set: dict[tuple[str, str], ArenaCard] = {}
        self._by_name: dict[str, ArenaCard] = {}
        for printing in printings:
            self.add(printing)

    @classmethod
    def from_scryfall(
        cls, cards: Iterable[dict[str, Any]], arena_only: bool = False
    ) -> "ScryfallCatalog":
        """
        Build a catalog from Scryfall card objects.

        Args:
            cards: Scryfall card objects (bulk data entries)
            arena_only: Skip printings not available on Arena
        """
        catalog = cls()
        oracle_cards: dict[str, Card] = {}
        for data in cards:
            if not data.get("name"):
                continue
            if arena_only and not is_arena_printing(data):
                continue
            # Share one Card per oracle ID across printings
            oracle_id = data.get("oracle_id") or data["name"]
            card = oracle_cards.get(oracle_id)
            if card is None:
                card = oracle_cards[oracle_id] = card_from_scryfall(data)
            catalog.add(printing_from_scryfall(data, card))
        return catalog

    def add(self, printing: ArenaCard) -> None:
        set_key = printing.set_code.lower()
        for name in {printing.card.name, printing.card.main_name}:
            self._by_printing.setdefault((name, set_key, printing.collector_number), printing)
            self._by_set.setdefault((name, set_key), printing)
            self._by_name.setdefault(name, printing)

    def lookup(self, entry: ArenaDeckEntry) -> ArenaCard | None:
        if entry.set_code is not None and entry.collector_number is not None:
            set_key = entry.set_code.lower()
            printing = self._by_printing.get((entry.name, set_key, entry.collector_number))
            if printing is not None:
                return printing
            printing = self._by_set.get((entry.name, set_key))
            if printing is not None:
                return printing
        return self._by_name.get(entry.name)

    def printings(self) -> list[ArenaCard]:
        """Distinct printings in load order."""
        return list(dict.fromkeys(self._by_printing.values()))

    def __len__(self) -> int:
        return len(self.printings())


# Scryfall card fields the catalog reads; everything else is dropped on download
CATALOG_FIELDS = frozenset(
    {
        "oracle_id",
        "name",
        "layout",
        "cmc",
        "type_line",
        "oracle_text",
        "colors",
        "color_identity",
        "card_faces",
        "set",
        "collector_number",
        "released_at",
        "arena_id",
        "games",
    }
)
FACE_FIELDS = frozenset({"name", "type_line", "oracle_text", "colors"})


def is_arena_printing(data: dict[str, Any]) -> bool:
    return "arena" in data.get("games", [])


def slim_printing(data: dict[str, Any]) -> dict[str, Any]:
    """Keep only the fields the catalog reads from a Scryfall card object."""
    slim = {key: value for key, value in data.items() if key in CATALOG_FIELDS}
    if "card_faces" in slim:
        slim["card_faces"] = [
            {key: value for key, value in face.items() if key in FACE_FIELDS}
            for face in slim["card_faces"]
        ]
    return slim


def write_arena_printings(bulk_path: Path, output_path: Path) -> int:
    """
    Reduce a Scryfall bulk data file to Arena printings.

    Args:
        bulk_path: Downloaded bulk data file (a JSON array of card objects)
        output_path: Where to write the reduced card list

    Returns:
        Number of printings written

    Raises:
        ValueError: If the bulk data is not a JSON array
    """
    with open(bulk_path, encoding="utf-8") as f:
        try:
            cards = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Bulk data at {bulk_path} is corrupted: {e}") from e
    if not isinstance(cards, list):
        raise ValueError(f"Bulk data at {bulk_path} is not a card list")

    printings = [slim_printing(card) for card in cards if is_arena_printing(card)]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(printings, f)

    logger.info("Kept %d Arena printings of %d bulk entries", len(printings), len(cards))
    return len(printings)


async def download_card_database(
    output_path: Path | None = None, bulk_type: str | None = None
) -> Path:
    """
    Download Scryfall bulk data and save its Arena printings.

    The bulk file is streamed to a temporary file next to the output,
    reduced to Arena printings, then removed.

    Args:
        output_path: Where to save the card list. Defaults to the configured path.
        bulk_type: Scryfall bulk data type. Defaults to the configured type.

    Returns:
        Path to the saved card list.

    Raises:
        ValueError: If the bulk data type is not offered or its file is unreadable
        httpx.HTTPError: If download fails
    """
    if output_path is None:
        output_path = settings.card_database_path
    if bulk_type is None:
        bulk_type = settings.card_bulk_type

    output_path.parent.mkdir(parents=True, exist_ok=True)
    bulk_path = output_path.with_name(output_path.name + ".part")

    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(SCRYFALL_BULK_API)
        response.raise_for_status()

        download_url = next(
            (item["download_uri"] for item in response.json()["data"] if item["type"] == bulk_type),
            None,
        )
        if not download_url:
            raise ValueError(f"Scryfall offers no {bulk_type} bulk data")

        logger.info("Downloading %s bulk data from %s", bulk_type, download_url)
        try:
            async with client.stream("GET", download_url, timeout=300.0) as response:
                response.raise_for_status()
                with open(bulk_path, "wb") as f:
                    async for chunk in response.aiter_bytes(8192):
                        f.write(chunk)
            write_arena_printings(bulk_path, output_path)
        finally:
            bulk_path.unlink(missing_ok=True)

    return output_path


def load_card_catalog(path: Path | None = None, arena_only: bool = True) -> ScryfallCatalog:
    """
    Load a card catalog from a Scryfall card list.

    Printings not available on Arena are skipped unless arena_only is False,
    so bare card names never resolve to a paper-only printing.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON
    """
    if path is None:
        path = settings.card_database_path

    if not path.exists():
        raise FileNotFoundError(
            f"Card database not found at {path}. "
            "Run `python -m arenadeck.jobs.download_cards` first."
        )

    with open(path, encoding="utf-8") as f:
        try:
            cards = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Card database at {path} is corrupted: {e}") from e

    catalog = ScryfallCatalog.from_scryfall(cards, arena_only=arena_only)
    logger.info("Loaded %d printings from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_card_catalog() -> ScryfallCatalog:
    """Get the cached catalog for the configured card database."""
    return load_card_catalog()

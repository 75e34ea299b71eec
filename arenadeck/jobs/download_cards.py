"""
Refresh the Arena card list backing the card catalog.

Run this job before resolving deck lists:

    python -m arenadeck.jobs.download_cards [output_path]
"""

import asyncio
import logging
import sys
from pathlib import Path

from arenadeck.services.card_catalog import (
    ScryfallCatalog,
    download_card_database,
    get_card_catalog,
    load_card_catalog,
)

logger = logging.getLogger(__name__)


def summarize(catalog: ScryfallCatalog) -> str:
    sets = {printing.set_code for printing in catalog.printings()}
    return f"{len(catalog)} printings in {len(sets)} sets"


async def refresh_card_catalog(output_path: Path | None = None) -> ScryfallCatalog:
    """
    Download the Arena card list and load it as a catalog.

    The cached catalog is dropped so the next lookup reads the new list.
    """
    try:
        path = await download_card_database(output_path)
    except Exception as e:
        logger.error("Failed to refresh card catalog: %s", e)
        raise

    get_card_catalog.cache_clear()
    catalog = load_card_catalog(path)
    logger.info("Card catalog at %s: %s", path, summarize(catalog))
    return catalog


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    output_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    asyncio.run(refresh_card_catalog(output_path))


if __name__ == "__main__":
    main()

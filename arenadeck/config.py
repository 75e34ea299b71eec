from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARENADECK_")

    app_name: str = "arenadeck"
    debug: bool = False

    # Arena card list backing the card catalog
    card_database_path: Path = DATA_DIR / "arena-cards.json"

    # Scryfall bulk data type the card list is cut from
    card_bulk_type: str = "default_cards"


settings = Settings()


# =============================================================================
# BEST-OF-ONE SIDEBOARD DISPLAY
# =============================================================================

# Sideboard slots Arena shows in a best-of-one match without scrolling.
# Cards in the companion section take slots from this.
BO1_SIDEBOARD_SIZE = 7

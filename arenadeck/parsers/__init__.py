from arenadeck.parsers.arena_deck import (
    parse_arena_deck,
    read_arena_deck,
    read_arena_deck_file,
    read_entries,
)

__all__ = [
    "parse_arena_deck",
    "read_arena_deck",
    "read_arena_deck_file",
    "read_entries",
]

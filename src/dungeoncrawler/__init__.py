"""
Dungeon crawler core package.

This package provides headless domain logic for a text dungeon crawl:
- A room graph generated as a random connected graph and stocked with content
- Bit-batch combat between the player and a monster
- Room entry handling that consumes monsters and items for good
- A fixed-width binary save format for the whole dungeon

The CLI and the interactive session loop import and compose these services.
"""
from .combat import CombatResult, fight
from .dungeon import Dungeon, Player, Room, generate, new_dungeon, populate
from .errors import DungeonCrawlerError, InvalidChoice, InvalidRoomError, PlayerDefeated
from .game import EntryOutcome, OutcomeKind, enter
from .persistence import SaveIOError, SaveValidationError, load, save

__version__ = "0.1.0"

__all__ = [
    "CombatResult",
    "fight",
    "Dungeon",
    "Player",
    "Room",
    "generate",
    "new_dungeon",
    "populate",
    "DungeonCrawlerError",
    "InvalidChoice",
    "InvalidRoomError",
    "PlayerDefeated",
    "EntryOutcome",
    "OutcomeKind",
    "enter",
    "SaveIOError",
    "SaveValidationError",
    "load",
    "save",
]

"""
Dungeon package.

Contains:
- The room graph model and the closed set of room content variants.
- The procedural generator that builds a connected graph and stocks it.
"""

from .models import (
    Dungeon,
    Empty,
    Item,
    ItemKind,
    Monster,
    MonsterKind,
    Player,
    Room,
    RoomContent,
    Treasure,
)
from .generator import DungeonGenerator, generate, new_dungeon, populate

__all__ = [
    "Dungeon",
    "Empty",
    "Item",
    "ItemKind",
    "Monster",
    "MonsterKind",
    "Player",
    "Room",
    "RoomContent",
    "Treasure",
    "DungeonGenerator",
    "generate",
    "new_dungeon",
    "populate",
]

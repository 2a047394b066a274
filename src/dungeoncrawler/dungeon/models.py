from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Set, Tuple, Union

from ..errors import InvalidRoomError

logger = logging.getLogger(__name__)


class MonsterKind(IntEnum):
    GOBLIN = 0
    TROLL = 1


class ItemKind(IntEnum):
    POTION = 0
    SWORD = 1


# kind -> (name, hp, damage)
MONSTER_TABLE: Dict[MonsterKind, Tuple[str, int, int]] = {
    MonsterKind.GOBLIN: ("Goblin", 8, 5),
    MonsterKind.TROLL: ("Troll", 12, 3),
}

# kind -> (name, hp_restore, damage_boost)
ITEM_TABLE: Dict[ItemKind, Tuple[str, int, int]] = {
    ItemKind.POTION: ("Potion", 10, 0),
    ItemKind.SWORD: ("Sword", 0, 2),
}


@dataclass
class Empty:
    """Nothing here, either from the start or because the content was consumed."""


@dataclass
class Treasure:
    """The treasure room. Reaching it ends the game."""


@dataclass
class Monster:
    """A monster waiting in a room.

    Attributes:
        kind: Which monster this is.
        name: Display name.
        hp: Remaining hit points; the monster is dead once this is <= 0.
        damage: Damage dealt to the player per landed attack.
    """

    kind: MonsterKind
    name: str
    hp: int
    damage: int

    @classmethod
    def from_kind(cls, kind: MonsterKind) -> "Monster":
        kind = MonsterKind(kind)
        name, hp, damage = MONSTER_TABLE[kind]
        return cls(kind=kind, name=name, hp=hp, damage=damage)

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass
class Item:
    """A one-shot pickup applied to the player immediately on entry."""

    kind: ItemKind
    name: str
    hp_restore: int
    damage_boost: int

    @classmethod
    def from_kind(cls, kind: ItemKind) -> "Item":
        kind = ItemKind(kind)
        name, hp_restore, damage_boost = ITEM_TABLE[kind]
        return cls(kind=kind, name=name, hp_restore=hp_restore, damage_boost=damage_boost)


RoomContent = Union[Empty, Monster, Item, Treasure]


@dataclass
class Room:
    """A node in the dungeon graph.

    Rooms reference each other by id only; the Dungeon owns all of them.
    """

    id: int
    neighbors: Set[int] = field(default_factory=set)
    content: RoomContent = field(default_factory=Empty)
    visited: bool = False

    @property
    def degree(self) -> int:
        return len(self.neighbors)


@dataclass
class Player:
    location: int = 0
    hp: int = 20
    damage: int = 5

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass
class Dungeon:
    """Ordered collection of rooms indexed 0..N-1 forming an undirected graph."""

    rooms: List[Room] = field(default_factory=list)

    @classmethod
    def with_rooms(cls, n: int) -> "Dungeon":
        """Create ``n`` empty, unconnected rooms."""
        return cls(rooms=[Room(id=i) for i in range(n)])

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self):
        return iter(self.rooms)

    def has_room(self, room_id: int) -> bool:
        return 0 <= room_id < len(self.rooms)

    def room(self, room_id: int) -> Room:
        if not self.has_room(room_id):
            raise InvalidRoomError(f"No room with id {room_id} (dungeon has {len(self.rooms)} rooms)")
        return self.rooms[room_id]

    def neighbors_of(self, room_id: int) -> List[int]:
        return sorted(self.room(room_id).neighbors)

    def connect(self, a: int, b: int) -> None:
        """Add an undirected edge between rooms ``a`` and ``b``."""
        if a == b:
            raise ValueError(f"Cannot connect room {a} to itself")
        self.room(a).neighbors.add(b)
        self.room(b).neighbors.add(a)

    def is_connected(self) -> bool:
        """Return True when every room is reachable from room 0."""
        if not self.rooms:
            return False
        seen = {0}
        queue = deque([0])
        while queue:
            current = queue.popleft()
            for nxt in self.rooms[current].neighbors:
                if nxt not in seen and self.has_room(nxt):
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == len(self.rooms)

    def is_symmetric(self) -> bool:
        """Return True when every edge is listed by both of its rooms."""
        for room in self.rooms:
            for other in room.neighbors:
                if not self.has_room(other) or room.id not in self.rooms[other].neighbors:
                    return False
        return True

    def treasure_room(self) -> Optional[int]:
        for room in self.rooms:
            if isinstance(room.content, Treasure):
                return room.id
        return None

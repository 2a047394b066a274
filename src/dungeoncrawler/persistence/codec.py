"""Binary save format.

Every field is a fixed-width int32 in native byte order::

    room_count, player_room, player_hp, player_damage
    per room, in id order:
        visited, content_type
        [monster_type, hp, damage]   if content_type == MONSTER
        [item_type]                  if content_type == ITEM
        neighbor_count, neighbor_ids...

Item stats are not stored; they are rebuilt from the item type on decode.
"""
from __future__ import annotations

import enum
import logging
import struct
from typing import List, Tuple

from ..dungeon.models import (
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
from .errors import SaveIOError, SaveValidationError

logger = logging.getLogger(__name__)

INT32 = struct.Struct("=i")

# visited + content_type + neighbor_count
MIN_ROOM_BYTES = 3 * INT32.size


class ContentType(enum.IntEnum):
    NONE = 0
    MONSTER = 1
    ITEM = 2
    TREASURE = 3


def content_type(content: RoomContent) -> ContentType:
    if isinstance(content, Monster):
        return ContentType.MONSTER
    if isinstance(content, Item):
        return ContentType.ITEM
    if isinstance(content, Treasure):
        return ContentType.TREASURE
    return ContentType.NONE


def encode(player: Player, dungeon: Dungeon) -> bytes:
    """Encode the player and the full dungeon graph to bytes."""
    fields: List[int] = [len(dungeon), player.location, player.hp, player.damage]
    for room in dungeon.rooms:
        tag = content_type(room.content)
        fields.append(1 if room.visited else 0)
        fields.append(int(tag))
        if tag is ContentType.MONSTER:
            fields.extend([int(room.content.kind), room.content.hp, room.content.damage])
        elif tag is ContentType.ITEM:
            fields.append(int(room.content.kind))
        neighbors = sorted(room.neighbors)
        fields.append(len(neighbors))
        fields.extend(neighbors)
    try:
        return struct.pack(f"={len(fields)}i", *fields)
    except struct.error as e:
        raise SaveValidationError(f"Value does not fit the save format: {e}") from e


class _Reader:
    """Sequential int32 reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def int32(self, what: str) -> int:
        if self.remaining < INT32.size:
            raise SaveIOError(f"Truncated save data while reading {what} at byte {self.offset}")
        (value,) = INT32.unpack_from(self.data, self.offset)
        self.offset += INT32.size
        return value


def _decode_content(reader: _Reader, room_id: int) -> RoomContent:
    raw = reader.int32(f"room {room_id} content type")
    try:
        tag = ContentType(raw)
    except ValueError:
        raise SaveValidationError(f"Room {room_id}: unknown content type {raw}") from None

    if tag is ContentType.MONSTER:
        raw_kind = reader.int32(f"room {room_id} monster type")
        hp = reader.int32(f"room {room_id} monster hp")
        damage = reader.int32(f"room {room_id} monster damage")
        try:
            kind = MonsterKind(raw_kind)
        except ValueError:
            raise SaveValidationError(f"Room {room_id}: unknown monster type {raw_kind}") from None
        if damage <= 0:
            raise SaveValidationError(f"Room {room_id}: monster damage must be positive, got {damage}")
        monster = Monster.from_kind(kind)
        monster.hp = hp
        monster.damage = damage
        return monster
    if tag is ContentType.ITEM:
        raw_kind = reader.int32(f"room {room_id} item type")
        try:
            return Item.from_kind(ItemKind(raw_kind))
        except ValueError:
            raise SaveValidationError(f"Room {room_id}: unknown item type {raw_kind}") from None
    if tag is ContentType.TREASURE:
        return Treasure()
    return Empty()


def decode(data: bytes, strict: bool = True) -> Tuple[Player, Dungeon]:
    """Decode bytes produced by :func:`encode`.

    Args:
        data: Raw save bytes.
        strict: If True, reject graphs where an edge is listed by only one of
            its rooms. If False, adjacency is trusted as stored.

    Returns:
        (player, dungeon)

    Raises:
        SaveIOError: The data is truncated or has trailing bytes.
        SaveValidationError: A field holds a value the format does not allow.
    """
    reader = _Reader(data)
    room_count = reader.int32("room count")
    location = reader.int32("player room")
    hp = reader.int32("player hp")
    damage = reader.int32("player damage")

    if room_count < 2:
        raise SaveValidationError(f"Room count must be at least 2, got {room_count}")
    if room_count * MIN_ROOM_BYTES > reader.remaining:
        raise SaveIOError(f"Save data too short for {room_count} rooms")
    if not 0 <= location < room_count:
        raise SaveValidationError(f"Player room {location} is outside 0..{room_count - 1}")
    if hp <= 0:
        raise SaveValidationError(f"Player hp must be positive, got {hp}")
    if damage <= 0:
        raise SaveValidationError(f"Player damage must be positive, got {damage}")

    rooms: List[Room] = []
    for room_id in range(room_count):
        visited = reader.int32(f"room {room_id} visited flag")
        if visited not in (0, 1):
            raise SaveValidationError(f"Room {room_id}: visited flag must be 0 or 1, got {visited}")
        content = _decode_content(reader, room_id)
        count = reader.int32(f"room {room_id} neighbor count")
        if count < 0:
            raise SaveValidationError(f"Room {room_id}: negative neighbor count {count}")
        neighbors = set()
        for _ in range(count):
            other = reader.int32(f"room {room_id} neighbor id")
            if not 0 <= other < room_count or other == room_id:
                raise SaveValidationError(f"Room {room_id}: invalid neighbor id {other}")
            neighbors.add(other)
        rooms.append(Room(id=room_id, neighbors=neighbors, content=content, visited=bool(visited)))

    if reader.remaining:
        raise SaveIOError(f"{reader.remaining} unexpected trailing bytes in save data")

    dungeon = Dungeon(rooms=rooms)
    if not dungeon.is_symmetric():
        if strict:
            raise SaveValidationError("Save data lists a one-way connection between rooms")
        logger.warning("Loaded dungeon has one-way connections; trusting adjacency as stored")

    return Player(location=location, hp=hp, damage=damage), dungeon

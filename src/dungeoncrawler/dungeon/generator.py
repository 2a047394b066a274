from __future__ import annotations

import logging

from ..core.rng import RNG
from .models import Dungeon, Empty, Item, ItemKind, Monster, MonsterKind, Treasure

logger = logging.getLogger(__name__)

MAX_NEIGHBORS = 4


class DungeonGenerator:
    """Random room-graph generator.

    Builds the graph in two phases. A random recursive tree links every room
    to an earlier one that is not yet full, so the graph is connected by
    construction and needs no check afterwards. Then each room tries to add a
    few extra edges; attempts that hit itself, an existing neighbor or a full
    room are dropped rather than retried, so the realized extra-edge count is
    often below the draw.
    """

    def __init__(self, rng: RNG, max_neighbors: int = MAX_NEIGHBORS) -> None:
        if max_neighbors < 2:
            raise ValueError("max_neighbors must be >= 2")
        self.rng = rng
        self.max_neighbors = max_neighbors

    def generate(self, n: int) -> Dungeon:
        """Build ``n`` connected rooms with no content.

        Args:
            n: Number of rooms (must be >= 2).

        Returns:
            A new Dungeon whose rooms are all Empty and unvisited.
        """
        if n < 2:
            raise ValueError(f"A dungeon needs at least 2 rooms, got {n}")
        dungeon = Dungeon.with_rooms(n)

        # Spanning tree: attach each room to a uniformly chosen earlier room
        # that still has a free slot. A tree always has one, so this never stalls.
        open_rooms = [0]
        for i in range(1, n):
            j = self.rng.choice(open_rooms)
            dungeon.connect(i, j)
            logger.debug("Tree edge %d-%d", i, j)
            if dungeon.rooms[j].degree >= self.max_neighbors:
                open_rooms.remove(j)
            open_rooms.append(i)

        added = 0
        skipped = 0
        for room in dungeon.rooms:
            deg = room.degree
            extras = self.rng.randint(0, self.max_neighbors - deg) if deg < self.max_neighbors else 0
            for _ in range(extras):
                j = self.rng.randint(0, n - 1)
                if j == room.id or j in room.neighbors or dungeon.rooms[j].degree >= self.max_neighbors:
                    skipped += 1
                    continue
                dungeon.connect(room.id, j)
                added += 1
                logger.debug("Extra edge %d-%d", room.id, j)

        logger.info("Generated %d rooms (%d extra edges, %d attempts skipped)", n, added, skipped)
        return dungeon

    def populate(self, dungeon: Dungeon) -> Dungeon:
        """Stock every room except room 0 with content.

        One room in [1, n-1] becomes the Treasure room; every other non-start
        room is Empty, a Monster or an Item with equal probability.
        """
        n = len(dungeon)
        if n < 2:
            raise ValueError("Cannot populate a dungeon with fewer than 2 rooms")
        treasure = self.rng.randint(1, n - 1)
        dungeon.rooms[0].content = Empty()
        counts = {"empty": 0, "monster": 0, "item": 0}
        for room in dungeon.rooms[1:]:
            if room.id == treasure:
                room.content = Treasure()
                continue
            roll = self.rng.randint(0, 2)
            if roll == 0:
                room.content = Empty()
                counts["empty"] += 1
            elif roll == 1:
                room.content = Monster.from_kind(self.rng.choice(list(MonsterKind)))
                counts["monster"] += 1
            else:
                room.content = Item.from_kind(self.rng.choice(list(ItemKind)))
                counts["item"] += 1
        logger.info(
            "Populated dungeon: treasure in room %d, %d monsters, %d items, %d empty",
            treasure,
            counts["monster"],
            counts["item"],
            counts["empty"],
        )
        return dungeon


def generate(n: int, rng: RNG) -> Dungeon:
    return DungeonGenerator(rng).generate(n)


def populate(dungeon: Dungeon, rng: RNG) -> Dungeon:
    return DungeonGenerator(rng).populate(dungeon)


def new_dungeon(n: int, rng: RNG, max_neighbors: int = MAX_NEIGHBORS) -> Dungeon:
    """Generate and populate a dungeon in one call."""
    gen = DungeonGenerator(rng, max_neighbors=max_neighbors)
    return gen.populate(gen.generate(n))

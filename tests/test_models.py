import pytest

from dungeoncrawler.dungeon.models import (
    Dungeon,
    Empty,
    Item,
    ItemKind,
    Monster,
    MonsterKind,
    Player,
    Room,
    Treasure,
)
from dungeoncrawler.errors import DungeonCrawlerError, InvalidRoomError


def test_canonical_monsters():
    assert Monster.from_kind(MonsterKind.GOBLIN) == Monster(MonsterKind.GOBLIN, "Goblin", 8, 5)
    assert Monster.from_kind(MonsterKind.TROLL) == Monster(MonsterKind.TROLL, "Troll", 12, 3)
    assert Monster.from_kind(1).kind is MonsterKind.TROLL


def test_canonical_items():
    assert Item.from_kind(ItemKind.POTION) == Item(ItemKind.POTION, "Potion", 10, 0)
    assert Item.from_kind(ItemKind.SWORD) == Item(ItemKind.SWORD, "Sword", 0, 2)
    with pytest.raises(ValueError):
        Item.from_kind(7)


def test_new_room_is_empty_and_unvisited():
    room = Room(id=0)
    assert isinstance(room.content, Empty)
    assert room.neighbors == set()
    assert room.visited is False
    assert Room(id=1).neighbors is not room.neighbors


def test_player_defaults():
    player = Player()
    assert (player.location, player.hp, player.damage) == (0, 20, 5)
    assert player.alive
    player.hp = 0
    assert not player.alive


def test_connect_is_symmetric(line_dungeon):
    assert line_dungeon.neighbors_of(1) == [0, 2]
    line_dungeon.connect(3, 0)
    assert 3 in line_dungeon.room(0).neighbors
    assert 0 in line_dungeon.room(3).neighbors
    assert line_dungeon.is_symmetric()


def test_connect_rejects_self_loop(line_dungeon):
    with pytest.raises(ValueError):
        line_dungeon.connect(2, 2)


def test_unknown_room_id(line_dungeon):
    for bad in (-1, 4, 100):
        with pytest.raises(InvalidRoomError):
            line_dungeon.room(bad)
    assert issubclass(InvalidRoomError, DungeonCrawlerError)
    assert issubclass(InvalidRoomError, IndexError)


def test_connectivity_check():
    dungeon = Dungeon.with_rooms(3)
    dungeon.connect(0, 1)
    assert not dungeon.is_connected()
    dungeon.connect(1, 2)
    assert dungeon.is_connected()
    assert len(dungeon) == 3
    assert [r.id for r in dungeon] == [0, 1, 2]


def test_symmetry_check_spots_one_way_edge(line_dungeon):
    line_dungeon.rooms[0].neighbors.add(3)
    assert not line_dungeon.is_symmetric()


def test_treasure_room_lookup(line_dungeon):
    assert line_dungeon.treasure_room() is None
    line_dungeon.rooms[2].content = Treasure()
    assert line_dungeon.treasure_room() == 2

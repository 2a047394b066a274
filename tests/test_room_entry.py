from dungeoncrawler.combat.engine import CombatEngine, CombatResult
from dungeoncrawler.dungeon.models import Empty, Item, ItemKind, Monster, MonsterKind, Player, Room, Treasure
from dungeoncrawler.game.entry import OutcomeKind, enter


def test_treasure_is_victory_and_terminal(rng):
    room = Room(id=3, content=Treasure())
    player = Player(location=3)

    outcome = enter(room, player, rng)

    assert outcome.kind is OutcomeKind.VICTORY
    assert outcome.terminal
    assert outcome.room_id == 3
    assert isinstance(room.content, Treasure)


def test_treasure_wins_even_if_room_was_visited(rng):
    room = Room(id=1, content=Treasure(), visited=True)
    assert enter(room, Player(), rng).kind is OutcomeKind.VICTORY


def test_empty_room_marks_visited(rng):
    room = Room(id=2)
    outcome = enter(room, Player(), rng)
    assert outcome.kind is OutcomeKind.EMPTY
    assert not outcome.terminal
    assert room.visited
    assert outcome.messages == ("The room is empty.",)


def test_potion_restores_hp_and_is_consumed(rng):
    room = Room(id=1, content=Item.from_kind(ItemKind.POTION))
    player = Player(hp=7, damage=5)

    outcome = enter(room, player, rng)

    assert outcome.kind is OutcomeKind.ITEM_ACQUIRED
    assert player.hp == 17
    assert player.damage == 5
    assert isinstance(room.content, Empty)
    assert room.visited
    assert "HP: 17, damage: 5" in outcome.messages[0]


def test_sword_boosts_damage_permanently(rng):
    player = Player(hp=20, damage=5)
    enter(Room(id=1, content=Item.from_kind(ItemKind.SWORD)), player, rng)
    enter(Room(id=2, content=Item.from_kind(ItemKind.SWORD)), player, rng)
    assert player.damage == 9
    assert player.hp == 20


def test_defeated_monster_is_cleared_for_good(scripted_rng):
    room = Room(id=4, content=Monster.from_kind(MonsterKind.GOBLIN))
    player = Player(hp=20, damage=5)
    rng = scripted_rng([0xFFFF])

    first = enter(room, player, rng)

    assert first.kind is OutcomeKind.MONSTER_ENCOUNTER
    assert first.combat.result is CombatResult.PLAYER_WON
    assert first.messages[0].startswith("A Goblin attacks!")
    assert "You defeated the Goblin!" in first.messages[-1]
    assert isinstance(room.content, Empty)
    assert room.visited

    second = enter(room, player, rng)
    assert second.kind is OutcomeKind.EMPTY
    assert second.combat is None
    assert isinstance(room.content, Empty)
    assert rng.drawn == 1


def test_picked_up_item_is_not_reapplied(rng):
    room = Room(id=1, content=Item.from_kind(ItemKind.POTION))
    player = Player(hp=10, damage=5)
    enter(room, player, rng)
    outcome = enter(room, player, rng)
    assert outcome.kind is OutcomeKind.EMPTY
    assert player.hp == 20


def test_player_death_is_terminal_and_keeps_monster(scripted_rng):
    troll = Monster(kind=MonsterKind.TROLL, name="Troll", hp=100, damage=100)
    room = Room(id=5, content=troll)
    player = Player(hp=1, damage=1)

    outcome = enter(room, player, scripted_rng([0x0000]))

    assert outcome.kind is OutcomeKind.PLAYER_DIED
    assert outcome.terminal
    assert room.visited
    assert room.content is troll
    assert player.hp <= 0


def test_visited_room_has_no_side_effects(rng):
    goblin = Monster.from_kind(MonsterKind.GOBLIN)
    room = Room(id=6, content=goblin, visited=True)
    player = Player(hp=20, damage=5)

    outcome = enter(room, player, rng)

    assert outcome.kind is OutcomeKind.EMPTY
    assert room.content is goblin
    assert goblin.hp == 8
    assert player.hp == 20


def test_engine_log_is_shared_with_caller(scripted_rng):
    engine = CombatEngine()
    room = Room(id=1, content=Monster.from_kind(MonsterKind.TROLL))
    enter(room, Player(), scripted_rng([0xFFFF]), engine=engine)
    assert len(engine.log.events("attack")) == 3

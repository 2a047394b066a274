from dungeoncrawler.combat.engine import CombatEngine
from dungeoncrawler.combat.log import PLAYER, CombatLog
from dungeoncrawler.dungeon.models import Monster, MonsterKind, Player


def test_hits_are_recorded_from_both_sides():
    log = CombatLog()
    log.player_hit("Troll", 5, 12, 7)
    log.monster_hit("Troll", 3, 20, 17)
    first, second = log.events("attack")
    assert first.message == "You hit the Troll for 5 damage (HP 12->7)."
    assert (first.data["attacker"], first.data["defender"]) == (PLAYER, "Troll")
    assert second.message == "Troll hits you for 3 damage (HP 20->17)."
    assert (second.data["attacker"], second.data["defender"]) == ("Troll", PLAYER)


def test_batches_are_logged_as_bit_strings():
    log = CombatLog()
    log.batch_drawn(1, 0x8001)
    (event,) = log.events("batch")
    assert event.message == "Batch 1: 1000000000000001"
    assert event.data == {"number": 1, "bits": 0x8001}


def test_defeat_messages_name_the_monster(caplog):
    caplog.set_level("INFO", logger="dungeoncrawler.combat.log")
    log = CombatLog()
    log.monster_defeated("Goblin")
    log.player_slain("Troll")
    assert [e.message for e in log.events("defeat")] == [
        "The Goblin was defeated.",
        "You were slain by the Troll.",
    ]
    assert "The Goblin was defeated." in caplog.text


def test_totals_match_the_fight_report(scripted_rng):
    player = Player(hp=20, damage=5)
    troll = Monster.from_kind(MonsterKind.TROLL)
    engine = CombatEngine()
    # Three monster hits, then the player lands three blows
    report = engine.resolve(player, troll, scripted_rng([0b0001110000000000]))
    assert engine.log.hits_by(PLAYER) == 3
    assert engine.log.hits_by("Troll") == 3
    assert engine.log.damage_taken(PLAYER) == report.player_hp_before - report.player_hp_after == 9
    assert engine.log.damage_taken("Troll") == 15
    assert len(engine.log.events("batch")) == report.batches == 1

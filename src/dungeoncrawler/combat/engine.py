from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from ..core.rng import RNG
from ..dungeon.models import Monster, Player
from .log import CombatLog

logger = logging.getLogger(__name__)

BATCH_BITS = 16


class CombatResult(enum.Enum):
    PLAYER_WON = "player_won"
    PLAYER_DIED = "player_died"


@dataclass(frozen=True)
class CombatReport:
    """Summary of a resolved fight."""

    result: CombatResult
    monster: str
    batches: int
    exchanges: int
    player_hp_before: int
    player_hp_after: int
    monster_hp_before: int
    monster_hp_after: int


class CombatEngine:
    """Bit-batch combat between the player and a single monster.

    Each batch is one 16-bit draw read from the most significant bit down: a 1
    bit is a player hit, a 0 bit a monster hit. The batch stops as soon as
    either side drops to zero hp or below, and a new batch is drawn only while
    both are still standing. The engine never ends the game itself; callers
    act on the returned result.
    """

    def __init__(self, log: CombatLog | None = None) -> None:
        self.log = log or CombatLog()

    def resolve(self, player: Player, monster: Monster, rng: RNG) -> CombatReport:
        if player.damage <= 0 or monster.damage <= 0:
            raise ValueError("both combatants need a positive damage value for combat to end")

        player_before = player.hp
        monster_before = monster.hp
        batches = 0
        exchanges = 0

        while player.hp > 0 and monster.hp > 0:
            bits = rng.bits(BATCH_BITS)
            batches += 1
            self.log.batch_drawn(batches, bits)
            for i in range(BATCH_BITS - 1, -1, -1):
                exchanges += 1
                if (bits >> i) & 1:
                    before = monster.hp
                    monster.hp -= player.damage
                    self.log.player_hit(monster.name, player.damage, before, monster.hp)
                else:
                    before = player.hp
                    player.hp -= monster.damage
                    self.log.monster_hit(monster.name, monster.damage, before, player.hp)
                if player.hp <= 0 or monster.hp <= 0:
                    break

        if player.hp <= 0:
            result = CombatResult.PLAYER_DIED
            self.log.player_slain(monster.name)
        else:
            result = CombatResult.PLAYER_WON
            self.log.monster_defeated(monster.name)

        logger.debug("Fight with %s ended after %d batches: %s", monster.name, batches, result.name)

        return CombatReport(
            result=result,
            monster=monster.name,
            batches=batches,
            exchanges=exchanges,
            player_hp_before=player_before,
            player_hp_after=player.hp,
            monster_hp_before=monster_before,
            monster_hp_after=monster.hp,
        )


def fight(player: Player, monster: Monster, rng: RNG) -> CombatResult:
    """Resolve a fight to the end and return who won."""
    return CombatEngine().resolve(player, monster, rng).result

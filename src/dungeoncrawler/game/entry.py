from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..combat.engine import CombatEngine, CombatReport, CombatResult
from ..core.rng import RNG
from ..dungeon.models import Empty, Item, Monster, Player, Room, Treasure

logger = logging.getLogger(__name__)


class OutcomeKind(enum.Enum):
    EMPTY = "empty"
    MONSTER_ENCOUNTER = "monster_encounter"
    PLAYER_DIED = "player_died"
    ITEM_ACQUIRED = "item_acquired"
    VICTORY = "victory"


@dataclass(frozen=True)
class EntryOutcome:
    """What happened when the player walked into a room, ready for display."""

    kind: OutcomeKind
    room_id: int
    messages: Tuple[str, ...] = ()
    combat: Optional[CombatReport] = None

    @property
    def terminal(self) -> bool:
        return self.kind in (OutcomeKind.VICTORY, OutcomeKind.PLAYER_DIED)


def enter(room: Room, player: Player, rng: RNG, engine: CombatEngine | None = None) -> EntryOutcome:
    """Resolve the player entering ``room``.

    Consumed content (a slain monster or a picked-up item) turns into Empty
    for good, and the visited flag is set on every non-terminal entry.

    Args:
        room: The room being entered.
        player: The player; hp and damage are updated in place.
        rng: Random source for combat.
        engine: Optional combat engine, e.g. to inspect its log.

    Returns:
        EntryOutcome describing the result. VICTORY and PLAYER_DIED are
        terminal and the caller must end the session.
    """
    content = room.content

    if isinstance(content, Treasure):
        logger.info("Player reached the treasure in room %d", room.id)
        return EntryOutcome(
            kind=OutcomeKind.VICTORY,
            room_id=room.id,
            messages=("You found the treasure! You win!",),
        )

    if room.visited:
        return EntryOutcome(kind=OutcomeKind.EMPTY, room_id=room.id, messages=("The room is empty.",))

    if isinstance(content, Monster):
        engine = engine or CombatEngine()
        messages = [f"A {content.name} attacks! (HP {content.hp}, damage {content.damage})"]
        report = engine.resolve(player, content, rng)
        room.visited = True
        if report.result is CombatResult.PLAYER_DIED:
            messages.append(f"You were slain by the {content.name}.")
            logger.info("Player died in room %d fighting a %s", room.id, content.name)
            return EntryOutcome(
                kind=OutcomeKind.PLAYER_DIED,
                room_id=room.id,
                messages=tuple(messages),
                combat=report,
            )
        if not content.alive:
            messages.append(f"You defeated the {content.name}! Your HP: {player.hp}")
            room.content = Empty()
        return EntryOutcome(
            kind=OutcomeKind.MONSTER_ENCOUNTER,
            room_id=room.id,
            messages=tuple(messages),
            combat=report,
        )

    if isinstance(content, Item):
        player.hp += content.hp_restore
        player.damage += content.damage_boost
        room.content = Empty()
        room.visited = True
        logger.debug("Player picked up %s in room %d", content.name, room.id)
        return EntryOutcome(
            kind=OutcomeKind.ITEM_ACQUIRED,
            room_id=room.id,
            messages=(f"You found a {content.name}! HP: {player.hp}, damage: {player.damage}",),
        )

    room.visited = True
    return EntryOutcome(kind=OutcomeKind.EMPTY, room_id=room.id, messages=("The room is empty.",))

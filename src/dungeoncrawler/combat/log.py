from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

PLAYER = "Player"


@dataclass(frozen=True)
class CombatEvent:
    """A log event emitted during combat.

    Event types: "batch", "attack", "defeat".
    """

    type: str
    message: str
    data: Optional[Dict[str, Any]] = None


class CombatLog:
    """In-memory record of one or more fights.

    The engine reports through the typed helpers below; each one formats the
    player-facing line, keeps the structured data and forwards the line to
    ``logging`` (defeats at INFO, everything else at DEBUG).
    """

    def __init__(self) -> None:
        self._events: List[CombatEvent] = []

    def add(self, event_type: str, message: str, **data: Any) -> None:
        ev = CombatEvent(type=event_type, message=message, data=data or None)
        self._events.append(ev)
        if event_type == "defeat":
            logger.info(message)
        else:
            logger.debug(message)

    def batch_drawn(self, number: int, bits: int) -> None:
        self.add("batch", f"Batch {number}: {bits:016b}", number=number, bits=bits)

    def player_hit(self, monster: str, damage: int, hp_before: int, hp_after: int) -> None:
        self.add(
            "attack",
            f"You hit the {monster} for {damage} damage (HP {hp_before}->{hp_after}).",
            attacker=PLAYER,
            defender=monster,
            damage=damage,
            hp_before=hp_before,
            hp_after=hp_after,
        )

    def monster_hit(self, monster: str, damage: int, hp_before: int, hp_after: int) -> None:
        self.add(
            "attack",
            f"{monster} hits you for {damage} damage (HP {hp_before}->{hp_after}).",
            attacker=monster,
            defender=PLAYER,
            damage=damage,
            hp_before=hp_before,
            hp_after=hp_after,
        )

    def monster_defeated(self, monster: str) -> None:
        self.add("defeat", f"The {monster} was defeated.", attacker=PLAYER, defender=monster)

    def player_slain(self, monster: str) -> None:
        self.add("defeat", f"You were slain by the {monster}.", attacker=monster, defender=PLAYER)

    def events(self, event_type: Optional[str] = None) -> List[CombatEvent]:
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e.type == event_type]

    def hits_by(self, attacker: str) -> int:
        """Number of attacks landed by ``attacker``."""
        return sum(1 for e in self.events("attack") if e.data["attacker"] == attacker)

    def damage_taken(self, defender: str) -> int:
        return sum(e.data["damage"] for e in self.events("attack") if e.data["defender"] == defender)

    def clear(self) -> None:
        self._events.clear()

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from ..combat.engine import CombatEngine
from ..core.rng import RNG
from ..dungeon.models import Dungeon, Player
from ..errors import InvalidChoice, PlayerDefeated
from ..persistence import SaveIOError, save
from .entry import EntryOutcome, OutcomeKind, enter

logger = logging.getLogger(__name__)

SAVE_AND_QUIT = -1
DEFAULT_SAVE_PATH = Path("dungeon.sav")


class SessionEnd(enum.Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"
    SAVED = "saved"


class GameSession:
    """
    Interactive play loop over a single dungeon.

    Each turn enters the player's current room, prints what happened, lists
    the exits and reads a destination. Entering ``-1`` saves and quits. Input
    and output are injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        player: Player,
        dungeon: Dungeon,
        rng: RNG,
        save_path: Union[str, os.PathLike] = DEFAULT_SAVE_PATH,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        engine: Optional[CombatEngine] = None,
    ) -> None:
        if not dungeon.has_room(player.location):
            raise ValueError(f"Player location {player.location} is not a room in this dungeon")
        self.player = player
        self.dungeon = dungeon
        self.rng = rng
        self.save_path = Path(save_path)
        self.engine = engine or CombatEngine()
        self.turns = 0
        self._input = input_fn
        self._output = output_fn
        self._eof = False

    def run(self) -> SessionEnd:
        """Play until the treasure is found, the player dies or saves and quits."""
        logger.info("Session started in room %d with %d rooms", self.player.location, len(self.dungeon))
        while True:
            try:
                outcome = self.enter_current()
            except PlayerDefeated as e:
                self._output("Game over.")
                logger.info("Session ended in defeat after %d turns: %s", self.turns, e)
                return SessionEnd.DEFEAT
            if outcome.kind is OutcomeKind.VICTORY:
                logger.info("Session ended in victory after %d turns", self.turns)
                return SessionEnd.VICTORY

            destination = self.prompt_destination()
            if destination is None:
                logger.info("Session saved to %s after %d turns", self.save_path, self.turns)
                return SessionEnd.SAVED
            self.turns += 1

    def enter_current(self) -> EntryOutcome:
        """Enter the player's current room and print the outcome.

        Raises:
            PlayerDefeated: The player died in combat. No save is written.
        """
        room = self.dungeon.room(self.player.location)
        self._output(f"You are in room {room.id}.")
        outcome = enter(room, self.player, self.rng, engine=self.engine)
        for line in outcome.messages:
            self._output(line)
        if outcome.kind is OutcomeKind.PLAYER_DIED:
            raise PlayerDefeated(f"slain in room {room.id}")
        return outcome

    def move(self, destination: int) -> None:
        current = self.dungeon.room(self.player.location)
        if destination not in current.neighbors:
            raise InvalidChoice(f"Room {destination} is not connected to room {current.id}.")
        logger.debug("Player moves %d -> %d", current.id, destination)
        self.player.location = destination

    def prompt_destination(self) -> Optional[int]:
        """Read destinations until a valid exit is chosen and move there.

        Returns the new room id, or None once the game has been saved.
        """
        exits = self.dungeon.neighbors_of(self.player.location)
        self._output("Exits: " + ", ".join(str(e) for e in exits))
        while True:
            raw = self._read(f"Enter a room to move to ({SAVE_AND_QUIT} to save and quit): ")
            try:
                choice = int(raw)
            except ValueError:
                self._output("Please enter a room number.")
                continue

            if choice == SAVE_AND_QUIT:
                if self.save_and_quit():
                    return None
                continue

            try:
                self.move(choice)
            except InvalidChoice as e:
                logger.debug("Rejected destination %d: %s", choice, e)
                self._output(str(e))
                continue
            return choice

    def save_and_quit(self) -> bool:
        try:
            save(self.save_path, self.player, self.dungeon)
        except SaveIOError as e:
            logger.error("Save failed: %s", e)
            if self._eof:
                raise
            self._output(f"Could not save the game: {e}")
            return False
        self._output(f"Game saved to {self.save_path}.")
        return True

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError:
            # No more input: treat as save-and-quit
            self._eof = True
            return str(SAVE_AND_QUIT)

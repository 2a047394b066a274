from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Tuple, Union

from ..dungeon.models import Dungeon, Player
from .codec import decode, encode
from .errors import SaveIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def save(path: PathLike, player: Player, dungeon: Dungeon) -> Path:
    """Write the game state to ``path`` atomically.

    Strategy:
    - Write to path.tmp
    - Flush and fsync
    - Replace path with path.tmp

    Raises:
        SaveIOError: The file could not be written.
    """
    path = Path(path)
    data = encode(player, dungeon)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        try:
            tmp.unlink()
        except OSError:
            logger.debug("Could not remove temporary save file %s", tmp)
        raise SaveIOError(f"Unable to write save to {path}: {e}") from e
    logger.info("Saved %d rooms to %s (%d bytes)", len(dungeon), path, len(data))
    return path


def load(path: PathLike, strict: bool = True) -> Tuple[Player, Dungeon]:
    """Read a game state written by :func:`save`.

    Raises:
        SaveIOError: The file is missing, unreadable or truncated.
        SaveValidationError: The file holds values the format does not allow.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise SaveIOError(f"Save file not found: {path}") from e
    except OSError as e:
        raise SaveIOError(f"Unable to read save from {path}: {e}") from e
    player, dungeon = decode(data, strict=strict)
    logger.info("Loaded %d rooms from %s", len(dungeon), path)
    return player, dungeon

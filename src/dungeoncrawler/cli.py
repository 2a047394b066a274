import argparse
import logging
import sys
from pathlib import Path

import yaml

from .core.rng import RNG
from .dungeon.generator import new_dungeon
from .game.session import DEFAULT_SAVE_PATH, GameSession
from .logging_config import configure_logging
from .persistence import SaveIOError, load
from .settings import Settings

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="dungeoncrawler",
        description="Explore a randomly generated dungeon graph and find the treasure.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Number of rooms (> 1) to start a new game, or a save file to load.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random number generator for a reproducible game.",
    )
    parser.add_argument(
        "--save",
        dest="save_path",
        type=Path,
        default=None,
        help="Where save-and-quit writes the game (default: the loaded file, or dungeon.sav).",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    return parser.parse_args(argv)


def _room_count(target: str):
    try:
        return int(target)
    except ValueError:
        return None


def main(argv=None, input_fn=input, output_fn=print) -> int:
    args = parse_args(argv)
    configure_logging(default_level=logging.DEBUG if args.debug else logging.WARNING)

    if args.target is None:
        print("usage: dungeoncrawler <num_rooms> | <save_file>", file=sys.stderr)
        return 1

    try:
        settings = Settings.load(user_path=args.settings_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load settings: %s", e)
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    rng = RNG(seed=args.seed)
    n = _room_count(args.target)
    if n is not None:
        if n <= 1:
            print(f"Number of rooms must be greater than 1, got {n}", file=sys.stderr)
            return 1
        dungeon = new_dungeon(n, rng, max_neighbors=settings.generation.max_neighbors)
        player = settings.new_player()
        save_path = args.save_path or DEFAULT_SAVE_PATH
    else:
        try:
            player, dungeon = load(args.target)
        except SaveIOError as e:
            logger.error("Failed to load game: %s", e)
            print(f"Failed to load game from {args.target}: {e}", file=sys.stderr)
            return 1
        save_path = args.save_path or Path(args.target)

    session = GameSession(player, dungeon, rng, save_path=save_path, input_fn=input_fn, output_fn=output_fn)
    try:
        end = session.run()
    except SaveIOError as e:
        print(f"Could not save the game: {e}", file=sys.stderr)
        return 1
    logger.info("Game over: %s", end.value)
    return 0

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .dungeon.models import Player

logger = logging.getLogger(__name__)


@dataclass
class PlayerSettings:
    start_hp: int = 20
    start_damage: int = 5


@dataclass
class GenerationSettings:
    max_neighbors: int = 4


@dataclass
class Settings:
    player: PlayerSettings = field(default_factory=PlayerSettings)
    generation: GenerationSettings = field(default_factory=GenerationSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        unknown = set(data) - {"player", "generation"}
        if unknown:
            raise ValueError(f"Unknown settings sections: {sorted(unknown)}")
        sections = {}
        for name, section_cls in (("player", PlayerSettings), ("generation", GenerationSettings)):
            try:
                sections[name] = section_cls(**(data.get(name) or {}))
            except TypeError as e:
                raise ValueError(f"Invalid keys in settings section '{name}': {e}") from e
        for key, value, minimum in (
            ("player.start_hp", sections["player"].start_hp, 1),
            ("player.start_damage", sections["player"].start_damage, 1),
            ("generation.max_neighbors", sections["generation"].max_neighbors, 2),
        ):
            if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
                raise ValueError(f"{key} must be an integer >= {minimum}, got {value!r}")
        return Settings(**sections)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from dataclass defaults and an optional user YAML file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                if not isinstance(user_data, dict):
                    raise ValueError(f"Settings file {user_path} must contain a mapping")
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)

    def new_player(self, location: int = 0) -> Player:
        return Player(location=location, hp=self.player.start_hp, damage=self.player.start_damage)

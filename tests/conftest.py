import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from dungeoncrawler.core.rng import RNG  # noqa: E402
from dungeoncrawler.dungeon.models import Dungeon  # noqa: E402


class ScriptedRNG(RNG):
    """RNG whose bit batches come from a fixed script; everything else is seeded."""

    def __init__(self, batches: Iterable[int], seed: int = 0) -> None:
        super().__init__(seed=seed)
        self._batches: List[int] = list(batches)
        self.drawn = 0

    def bits(self, n: int = 16) -> int:
        if not self._batches:
            raise AssertionError("ScriptedRNG ran out of bit batches")
        self.drawn += 1
        return self._batches.pop(0)


@pytest.fixture
def rng() -> RNG:
    return RNG(seed=1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG


@pytest.fixture
def line_dungeon() -> Dungeon:
    """Four empty rooms connected 0-1-2-3."""
    dungeon = Dungeon.with_rooms(4)
    dungeon.connect(0, 1)
    dungeon.connect(1, 2)
    dungeon.connect(2, 3)
    return dungeon

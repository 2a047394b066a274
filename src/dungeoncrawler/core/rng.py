from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    A single instance is created at startup and passed explicitly to the
    generator, the entry handler and the combat resolver. When no seed is given
    a time-based one is chosen and logged so a session can be replayed.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = time.time_ns()
            logger.info("No seed provided; using time-based seed %d", self.seed)
        else:
            logger.debug("Using seed: %r", self.seed)
        self._rng = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.randrange(len(seq))]

    def bits(self, n: int = 16) -> int:
        """Return a uniformly random unsigned integer of ``n`` bits."""
        if n <= 0:
            raise ValueError("n must be positive")
        return self._rng.getrandbits(n)

    def state(self):
        """Return the internal PRNG state for debugging or persistence."""
        return self._rng.getstate()

    def set_state(self, state) -> None:
        """Restore the internal PRNG state."""
        self._rng.setstate(state)

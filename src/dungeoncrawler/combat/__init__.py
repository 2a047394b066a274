"""
Combat package.

Contains:
- The bit-batch combat resolver.
- Combat logging to track attacks and defeats.
"""

from .engine import BATCH_BITS, CombatEngine, CombatReport, CombatResult, fight
from .log import CombatEvent, CombatLog

__all__ = [
    "BATCH_BITS",
    "CombatEngine",
    "CombatReport",
    "CombatResult",
    "fight",
    "CombatEvent",
    "CombatLog",
]

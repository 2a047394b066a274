"""Persistence subsystem.

This package provides:
- A fixed-width binary codec for the player and the full dungeon graph
- save/load helpers that handle atomic disk I/O and error reporting
"""

from .codec import ContentType, decode, encode
from .errors import SaveIOError, SaveValidationError
from .manager import load, save

__all__ = [
    "ContentType",
    "decode",
    "encode",
    "load",
    "save",
    "SaveIOError",
    "SaveValidationError",
]

from ..errors import DungeonCrawlerError


class SaveIOError(DungeonCrawlerError):
    """Raised when a save file cannot be opened, read or written."""


class SaveValidationError(SaveIOError):
    """Raised when a save file was read but its contents are structurally invalid."""

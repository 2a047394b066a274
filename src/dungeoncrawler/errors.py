class DungeonCrawlerError(Exception):
    """Base error for dungeon crawler domain exceptions."""


class InvalidChoice(DungeonCrawlerError):
    """Raised when the player picks a destination that is not adjacent to the current room."""


class InvalidRoomError(DungeonCrawlerError, IndexError):
    """Raised when a room id does not exist in the dungeon."""


class PlayerDefeated(DungeonCrawlerError):
    """Raised when the player's hp drops to zero or below during combat."""

from .entry import EntryOutcome, OutcomeKind, enter
from .session import GameSession, SessionEnd

__all__ = ["EntryOutcome", "OutcomeKind", "enter", "GameSession", "SessionEnd"]

"""Match services (pure helpers, no I/O).

``replay`` depends on the match aggregate and is imported from its module.
"""

from .validation import GAME_RULES, unique_player_ids, validate_roster
from .history import InMemoryThrowHistory, NullThrowHistory, ThrowHistory

__all__ = [
    "GAME_RULES",
    "InMemoryThrowHistory",
    "NullThrowHistory",
    "ThrowHistory",
    "unique_player_ids",
    "validate_roster",
]

"""Dart match scoring: rule variants and the match state machine."""

from .exceptions import (
    DomainException,
    GameFinishedError,
    InvalidHitError,
    InvalidSettingsError,
    NotCurrentTurnError,
    RosterError,
    ScoreStateError,
    TurnProtocolError,
    UnknownGameTypeError,
    UnknownPlayerError,
)
from .models import (
    ClosingScore,
    CountdownScore,
    EvaluationResult,
    Outcome,
    PlayerScore,
    Progress,
    SetsScore,
    Throw,
    ThrowRecord,
)
from .match import Match
from .scoring import GAME_TYPES, create_variant
from .services.replay import replay_throws

__all__ = [
    "GAME_TYPES",
    "ClosingScore",
    "CountdownScore",
    "DomainException",
    "EvaluationResult",
    "GameFinishedError",
    "InvalidHitError",
    "InvalidSettingsError",
    "Match",
    "NotCurrentTurnError",
    "Outcome",
    "PlayerScore",
    "Progress",
    "RosterError",
    "ScoreStateError",
    "SetsScore",
    "Throw",
    "ThrowRecord",
    "TurnProtocolError",
    "UnknownGameTypeError",
    "UnknownPlayerError",
    "create_variant",
    "replay_throws",
]

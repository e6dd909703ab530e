"""Value objects shared by the rule variants and the match aggregate."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .config import BULLSEYE, SCORING_SECTORS
from .exceptions import InvalidHitError


@dataclass(frozen=True)
class Throw:
    """A single validated dart: sector value and ring multiplier."""

    sector: int
    multiplier: int = 1

    def __post_init__(self) -> None:
        for name in ("sector", "multiplier"):
            value = getattr(self, name)
            # bool is a subclass of int in Python
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidHitError(f"{name} must be an integer.")

        if self.multiplier not in (1, 2, 3):
            raise InvalidHitError("Multiplier must be 1, 2 or 3.")
        if not (1 <= self.sector <= 20 or self.sector == BULLSEYE):
            raise InvalidHitError(f"Sector must be 1..20 or {BULLSEYE} (bull).")
        if self.sector == BULLSEYE and self.multiplier == 3:
            raise InvalidHitError("There is no triple bull.")

    @property
    def points(self) -> int:
        return self.sector * self.multiplier

    @property
    def is_double(self) -> bool:
        return self.multiplier == 2

    def __str__(self) -> str:
        prefix = {1: "S", 2: "D", 3: "T"}[self.multiplier]
        return f"{prefix}{self.sector}"


@dataclass(frozen=True)
class PlayerScore:
    player_id: str


@dataclass(frozen=True)
class CountdownScore(PlayerScore):
    remaining_in_leg: int
    legs_won: int = 0


@dataclass(frozen=True)
class SetsScore(CountdownScore):
    """Countdown score where ``legs_won`` counts legs in the current set."""

    sets_won: int = 0


@dataclass(frozen=True)
class ClosingScore(PlayerScore):
    """Cricket score: a points total plus hit counts per scoring sector.

    ``hits`` is aligned with ``SCORING_SECTORS`` (15..20, bull).
    """

    points: int = 0
    hits: tuple[int, ...] = (0,) * len(SCORING_SECTORS)

    def hits_on(self, sector: int) -> int:
        return self.hits[SCORING_SECTORS.index(sector)]

    def with_hits(self, sector: int, count: int) -> "ClosingScore":
        hits = list(self.hits)
        hits[SCORING_SECTORS.index(sector)] = count
        return replace(self, hits=tuple(hits))

    def closed_all(self, hits_to_close: int) -> bool:
        return all(count >= hits_to_close for count in self.hits)


class Outcome(str, Enum):
    BUST = "bust"
    CONTINUE = "continue"
    WIN = "win"
    TIE = "tie"


class Progress(str, Enum):
    NONE = "none"
    LEG_WON = "leg_won"
    SET_WON = "set_won"


def _frozen(scores: Optional[Mapping[str, PlayerScore]]) -> Optional[Mapping[str, PlayerScore]]:
    if not scores:
        return None
    return MappingProxyType(dict(scores))


@dataclass(frozen=True)
class EvaluationResult:
    outcome: Outcome
    updated_score: Optional[PlayerScore] = None
    other_updated_scores: Optional[Mapping[str, PlayerScore]] = None
    progress: Progress = Progress.NONE

    # The match restores the thrower from its own turn snapshot on a bust,
    # so no score travels with it.
    @classmethod
    def bust(cls) -> "EvaluationResult":
        return cls(outcome=Outcome.BUST)

    @classmethod
    def continued(
        cls,
        updated_score: PlayerScore,
        other_updated_scores: Optional[Mapping[str, PlayerScore]] = None,
        progress: Progress = Progress.NONE,
    ) -> "EvaluationResult":
        return cls(
            outcome=Outcome.CONTINUE,
            updated_score=updated_score,
            other_updated_scores=_frozen(other_updated_scores),
            progress=progress,
        )

    @classmethod
    def win(
        cls,
        final_score: PlayerScore,
        other_updated_scores: Optional[Mapping[str, PlayerScore]] = None,
    ) -> "EvaluationResult":
        return cls(
            outcome=Outcome.WIN,
            updated_score=final_score,
            other_updated_scores=_frozen(other_updated_scores),
        )

    @classmethod
    def tie(
        cls,
        final_score: PlayerScore,
        other_updated_scores: Optional[Mapping[str, PlayerScore]] = None,
    ) -> "EvaluationResult":
        return cls(
            outcome=Outcome.TIE,
            updated_score=final_score,
            other_updated_scores=_frozen(other_updated_scores),
        )


@dataclass(frozen=True)
class ThrowRecord:
    """One accepted throw, as written to the history sink."""

    sequence: int
    player_id: str
    throw: Throw
    outcome: Outcome

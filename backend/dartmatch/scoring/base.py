"""Shared plumbing for the rule variants.

A variant turns one dart plus the score of every participant into an
``EvaluationResult``. Variants hold nothing but their settings, never mutate
the score mapping they are given, and fail fast with ``ScoreStateError`` when
an entry is missing or of the wrong score type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Type

from ..exceptions import ScoreStateError
from ..models import CountdownScore, EvaluationResult, PlayerScore, Throw
from ..services.validation import validate_roster


class RuleVariant(ABC):
    game_type: ClassVar[str]
    settings_type: ClassVar[Type[Any]]
    score_type: ClassVar[Type[PlayerScore]]

    def __init__(self, settings: Any = None) -> None:
        if settings is None:
            settings = self.settings_type()
        if not isinstance(settings, self.settings_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.settings_type.__name__}, "
                f"got {type(settings).__name__}"
            )
        self.settings = settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.settings!r})"

    @property
    def darts_per_turn(self) -> int:
        return self.settings.darts_per_turn

    def validate_participants(self, player_ids: Sequence[str]) -> List[str]:
        return validate_roster(self.game_type, player_ids)

    @abstractmethod
    def create_initial_score(self, player_id: str) -> PlayerScore:
        ...

    @abstractmethod
    def evaluate_throw(
        self,
        player_id: str,
        throw: Throw,
        scores: Mapping[str, PlayerScore],
    ) -> EvaluationResult:
        ...

    def _score_for(
        self, scores: Mapping[str, PlayerScore], player_id: str, role: str = "player"
    ) -> Any:
        try:
            score = scores[player_id]
        except KeyError:
            raise ScoreStateError(
                f"{self.game_type}: no score entry for {role} {player_id!r}"
            ) from None
        if type(score) is not self.score_type:
            raise ScoreStateError(
                f"{self.game_type}: {role} {player_id!r} has a "
                f"{type(score).__name__}, expected {self.score_type.__name__}"
            )
        if score.player_id != player_id:
            raise ScoreStateError(
                f"{self.game_type}: score keyed by {player_id!r} "
                f"belongs to {score.player_id!r}"
            )
        return score

    def _other_scores(
        self, scores: Mapping[str, PlayerScore], player_id: str
    ) -> Dict[str, Any]:
        return {
            pid: self._score_for(scores, pid, "opponent")
            for pid in scores
            if pid != player_id
        }

    def _opponent(self, scores: Mapping[str, PlayerScore], player_id: str) -> Any:
        others = self._other_scores(scores, player_id)
        if len(others) != 1:
            raise ScoreStateError(
                f"{self.game_type}: expected exactly one opponent, found {len(others)}"
            )
        return next(iter(others.values()))


class CountdownVariant(RuleVariant):
    """Bust and double-out rules shared by the countdown games."""

    def is_bust(self, after: int) -> bool:
        """Instant bust for a non-zero remainder.

        With double-out a remainder of 1 can never be finished.
        """
        if after < 0:
            return True
        return self.settings.double_out_enabled and after == 1

    def finishes_leg(self, throw: Throw) -> bool:
        """Whether the dart that reached zero is a legal finish."""
        return not self.settings.double_out_enabled or throw.is_double

    def fresh_leg(self, score: CountdownScore) -> CountdownScore:
        return replace(score, remaining_in_leg=self.settings.score_per_leg)

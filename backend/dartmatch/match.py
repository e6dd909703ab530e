"""Match aggregate: turn order, darts per turn and leg/set rotation.

All scoring semantics live in the rule variant; the match only decides who
throws next and commits (or rolls back) the scores a variant hands back.
"""

from __future__ import annotations

import logging
import uuid
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import (
    GameFinishedError,
    NotCurrentTurnError,
    ScoreStateError,
    UnknownPlayerError,
)
from .models import EvaluationResult, Outcome, PlayerScore, Progress, Throw, ThrowRecord
from .services.history import NullThrowHistory, ThrowHistory

if TYPE_CHECKING:  # pragma: no cover
    from .scoring.base import RuleVariant

logger = logging.getLogger(__name__)


class Match:
    """A single match between a fixed roster of players.

    Not safe for concurrent callers; wrap each instance in a lock if several
    threads can submit throws.
    """

    def __init__(
        self,
        variant: "RuleVariant",
        player_ids: Sequence[str],
        *,
        history: Optional[ThrowHistory] = None,
        match_id: Optional[str] = None,
    ) -> None:
        self.id = match_id or uuid.uuid4().hex
        self._variant = variant
        self._players: Tuple[str, ...] = tuple(variant.validate_participants(player_ids))
        self._sink: ThrowHistory = history if history is not None else NullThrowHistory()

        scores: Dict[str, PlayerScore] = {}
        for pid in self._players:
            score = variant.create_initial_score(pid)
            if type(score) is not variant.score_type or score.player_id != pid:
                raise ScoreStateError(
                    f"{variant.game_type} created an invalid initial score for {pid!r}"
                )
            scores[pid] = score
        self._scores = scores

        self._history: List[ThrowRecord] = []
        self._current_index = 0
        self._darts_thrown = 0
        self._turn_snapshot: Optional[PlayerScore] = None
        self._leg_start_index = 0
        self._set_start_index = 0
        self._finished = False
        self._winner_id: Optional[str] = None
        self._is_tie = False

        logger.info(
            "Match %s created: %s for %s",
            self.id,
            variant.game_type,
            ", ".join(self._players),
        )

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def variant(self) -> "RuleVariant":
        return self._variant

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def current_player(self) -> Optional[str]:
        if self._finished:
            return None
        return self._players[self._current_index]

    @property
    def darts_thrown(self) -> int:
        return self._darts_thrown

    @property
    def leg_starting_player(self) -> str:
        return self._players[self._leg_start_index]

    @property
    def set_starting_player(self) -> str:
        return self._players[self._set_start_index]

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def winner_id(self) -> Optional[str]:
        return self._winner_id

    @property
    def is_tie(self) -> bool:
        return self._is_tie

    @property
    def history(self) -> Tuple[ThrowRecord, ...]:
        return tuple(self._history)

    def get_score_state(self, player_id: str) -> PlayerScore:
        try:
            return self._scores[player_id]
        except KeyError:
            raise UnknownPlayerError(player_id) from None

    def get_all_score_states(self) -> Mapping[str, PlayerScore]:
        return MappingProxyType(dict(self._scores))

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "gameType": self._variant.game_type,
            "players": list(self._players),
            "currentPlayer": self.current_player,
            "dartsThrown": self._darts_thrown,
            "finished": self._finished,
            "winner": self._winner_id,
            "tie": self._is_tie,
            "throws": len(self._history),
            "scores": {pid: self._scores[pid] for pid in self._players},
        }

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def register_throw(self, player_id: str, throw: Throw) -> EvaluationResult:
        """Apply one dart thrown by ``player_id`` and return its evaluation.

        Raises ``GameFinishedError`` or ``NotCurrentTurnError`` without
        touching any state when the call is out of sequence.
        """
        if self._finished:
            logger.warning("Rejected throw by %s: match %s is finished", player_id, self.id)
            raise GameFinishedError(self.id)

        current = self._players[self._current_index]
        if player_id != current:
            logger.warning("Rejected throw by %s: waiting for %s", player_id, current)
            raise NotCurrentTurnError(player_id, current)

        if not isinstance(throw, Throw):
            raise TypeError(f"expected a Throw, got {type(throw).__name__}")

        before = self._scores[player_id]
        result = self._variant.evaluate_throw(
            player_id, throw, MappingProxyType(self._scores)
        )
        self._check_result(player_id, result)

        logger.debug(
            "Match %s: %s threw %s -> %s (%s)",
            self.id,
            player_id,
            throw,
            result.outcome.value,
            result.progress.value,
        )

        if self._darts_thrown == 0:
            self._turn_snapshot = before

        if result.other_updated_scores:
            for pid, score in result.other_updated_scores.items():
                self._scores[pid] = score

        if result.outcome is Outcome.BUST:
            self._scores[player_id] = self._turn_snapshot
            logger.debug("%s busted; score restored", player_id)
            self._end_turn()
        elif result.outcome is Outcome.WIN:
            self._scores[player_id] = result.updated_score
            self._finish(winner_id=player_id)
        elif result.outcome is Outcome.TIE:
            self._scores[player_id] = result.updated_score
            self._finish(winner_id=None)
        else:
            self._scores[player_id] = result.updated_score
            self._darts_thrown += 1
            if result.progress is Progress.SET_WON:
                self._start_next_set()
            elif result.progress is Progress.LEG_WON:
                self._start_next_leg()
            elif self._darts_thrown >= self._variant.darts_per_turn:
                self._end_turn()

        record = ThrowRecord(
            sequence=len(self._history) + 1,
            player_id=player_id,
            throw=throw,
            outcome=result.outcome,
        )
        self._history.append(record)
        self._sink.record(record)

        return result

    def _check_result(self, player_id: str, result: EvaluationResult) -> None:
        if result.outcome is Outcome.BUST:
            return
        game_type = self._variant.game_type
        score_type = self._variant.score_type
        score = result.updated_score
        if score is None or score.player_id != player_id:
            raise ScoreStateError(f"{game_type} returned no score for {player_id!r}")
        if type(score) is not score_type:
            raise ScoreStateError(
                f"{game_type} returned a {type(score).__name__} for {player_id!r}, "
                f"expected {score_type.__name__}"
            )
        for pid, other in (result.other_updated_scores or {}).items():
            if pid not in self._scores or pid == player_id:
                raise ScoreStateError(f"{game_type} updated unexpected player {pid!r}")
            if type(other) is not score_type or other.player_id != pid:
                raise ScoreStateError(
                    f"{game_type} returned an invalid score for opponent {pid!r}"
                )

    def _end_turn(self) -> None:
        self._darts_thrown = 0
        self._turn_snapshot = None
        self._current_index = (self._current_index + 1) % len(self._players)
        logger.debug("Turn passes to %s", self._players[self._current_index])

    def _start_next_leg(self) -> None:
        self._leg_start_index = (self._leg_start_index + 1) % len(self._players)
        self._darts_thrown = 0
        self._turn_snapshot = None
        self._current_index = self._leg_start_index
        logger.info("New leg; %s throws first", self._players[self._leg_start_index])

    def _start_next_set(self) -> None:
        self._set_start_index = (self._set_start_index + 1) % len(self._players)
        self._leg_start_index = self._set_start_index
        self._darts_thrown = 0
        self._turn_snapshot = None
        self._current_index = self._set_start_index
        logger.info("New set; %s throws first", self._players[self._set_start_index])

    def _finish(self, winner_id: Optional[str]) -> None:
        self._finished = True
        self._winner_id = winner_id
        self._is_tie = winner_id is None
        self._darts_thrown = 0
        self._turn_snapshot = None
        if winner_id is None:
            logger.info("Match %s finished in a tie", self.id)
        else:
            logger.info("Match %s won by %s", self.id, winner_id)

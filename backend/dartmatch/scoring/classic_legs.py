"""Classic legs scoring engine.

Two players count down from ``score_per_leg`` to exactly zero; the first to
win ``legs_to_win_match`` legs takes the match. With advantages enabled the
winner must also lead by two legs, until the sudden-death leg decides it.
"""

import logging
from dataclasses import replace
from typing import Dict, Mapping

from ..models import CountdownScore, EvaluationResult, PlayerScore, Progress, Throw
from ..schemas import ClassicLegsSettings
from .base import CountdownVariant

logger = logging.getLogger(__name__)


class ClassicLegs(CountdownVariant):
    game_type = "classic_legs"
    settings_type = ClassicLegsSettings
    score_type = CountdownScore

    def create_initial_score(self, player_id: str) -> CountdownScore:
        return CountdownScore(
            player_id=player_id,
            remaining_in_leg=self.settings.score_per_leg,
            legs_won=0,
        )

    def evaluate_throw(
        self,
        player_id: str,
        throw: Throw,
        scores: Mapping[str, PlayerScore],
    ) -> EvaluationResult:
        player = self._score_for(scores, player_id)
        others = self._other_scores(scores, player_id)

        after = player.remaining_in_leg - throw.points

        if after != 0:
            if self.is_bust(after):
                return EvaluationResult.bust()
            return EvaluationResult.continued(replace(player, remaining_in_leg=after))

        if not self.finishes_leg(throw):
            return EvaluationResult.bust()

        legs_won = player.legs_won + 1
        updated = replace(
            player,
            remaining_in_leg=self.settings.score_per_leg,
            legs_won=legs_won,
        )

        if self.is_match_won(legs_won, others):
            logger.info("%s won the match with %d legs", player_id, legs_won)
            return EvaluationResult.win(updated)

        logger.info("%s won leg %d", player_id, legs_won)
        return EvaluationResult.continued(
            updated, self._start_new_leg(others), progress=Progress.LEG_WON
        )

    def is_match_won(self, legs_won: int, others: Mapping[str, CountdownScore]) -> bool:
        settings = self.settings
        if not settings.advantages_active:
            return legs_won >= settings.legs_to_win_match

        best_other = max((o.legs_won for o in others.values()), default=0)
        return (
            legs_won >= settings.legs_to_win_match and legs_won >= best_other + 2
        ) or legs_won >= settings.sudden_death_cap

    def _start_new_leg(
        self, others: Mapping[str, CountdownScore]
    ) -> Dict[str, CountdownScore]:
        reset = {}
        for pid, score in others.items():
            fresh = self.fresh_leg(score)
            if fresh != score:
                reset[pid] = fresh
        return reset


def init_variant(config: Dict) -> ClassicLegs:
    """Build a classic legs variant from a raw config mapping."""

    return ClassicLegs(ClassicLegsSettings.model_validate(config))

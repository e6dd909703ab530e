"""Classic sets scoring engine.

Tracks remaining score -> legs -> sets for two players. A set goes to the
first player to ``legs_to_win_set`` legs and the match to the first to
``sets_to_win_match`` sets. With advantages enabled, the deciding set (both
players one set from the match) must be won by two legs unless someone
reaches ``sudden_death_winning_leg``.
"""

import logging
from dataclasses import replace
from typing import Dict, Mapping

from ..models import EvaluationResult, PlayerScore, Progress, SetsScore, Throw
from ..schemas import ClassicSetsSettings
from .base import CountdownVariant

logger = logging.getLogger(__name__)


class ClassicSets(CountdownVariant):
    game_type = "classic_sets"
    settings_type = ClassicSetsSettings
    score_type = SetsScore

    def create_initial_score(self, player_id: str) -> SetsScore:
        return SetsScore(
            player_id=player_id,
            remaining_in_leg=self.settings.score_per_leg,
            legs_won=0,
            sets_won=0,
        )

    def evaluate_throw(
        self,
        player_id: str,
        throw: Throw,
        scores: Mapping[str, PlayerScore],
    ) -> EvaluationResult:
        player = self._score_for(scores, player_id)
        opponent = self._opponent(scores, player_id)

        after = player.remaining_in_leg - throw.points

        if after != 0:
            if self.is_bust(after):
                return EvaluationResult.bust()
            return EvaluationResult.continued(replace(player, remaining_in_leg=after))

        if not self.finishes_leg(throw):
            return EvaluationResult.bust()

        legs_won = player.legs_won + 1
        sets_won = player.sets_won
        set_won = match_won = False

        if self.is_decider(player.sets_won, opponent.sets_won):
            if self.is_decider_won(legs_won, opponent.legs_won):
                set_won = match_won = True
        elif legs_won >= self.settings.legs_to_win_set:
            set_won = True
            match_won = sets_won + 1 >= self.settings.sets_to_win_match

        if set_won:
            legs_won = 0
            sets_won += 1

        updated = replace(
            player,
            remaining_in_leg=self.settings.score_per_leg,
            legs_won=legs_won,
            sets_won=sets_won,
        )

        # The loser's final state is kept as-is once the match is over.
        if match_won:
            logger.info("%s won the match %d sets to %d", player_id, sets_won, opponent.sets_won)
            return EvaluationResult.win(updated)

        updated_opponent = replace(
            opponent,
            remaining_in_leg=self.settings.score_per_leg,
            legs_won=0 if set_won else opponent.legs_won,
        )
        others = {}
        if updated_opponent != opponent:
            others[opponent.player_id] = updated_opponent

        if set_won:
            logger.info("%s won set %d", player_id, sets_won)
            return EvaluationResult.continued(updated, others, progress=Progress.SET_WON)

        logger.info("%s won a leg (%d in set)", player_id, legs_won)
        return EvaluationResult.continued(updated, others, progress=Progress.LEG_WON)

    def is_decider(self, sets_won: int, opponent_sets_won: int) -> bool:
        """Both players are one set away from the match."""
        target = self.settings.sets_to_win_match - 1
        return (
            self.settings.advantages_enabled
            and sets_won == target
            and opponent_sets_won == target
        )

    def is_decider_won(self, legs_won: int, opponent_legs_won: int) -> bool:
        return (
            legs_won >= self.settings.legs_to_win_set
            and legs_won >= opponent_legs_won + 2
        ) or legs_won >= self.settings.sudden_death_winning_leg


def init_variant(config: Dict) -> ClassicSets:
    return ClassicSets(ClassicSetsSettings.model_validate(config))

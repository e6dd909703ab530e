"""Classic cricket scoring engine.

Players close the sectors 15-20 and bull by hitting each ``hits_to_close_sector``
times. Hits beyond closing score ``additional_hits * sector`` while at least
one opponent still has the sector open. The first player to close everything
while holding the best total wins.

How scoring hits are booked depends on ``settings.scoring``:

- ``standard``: the thrower banks the points; the highest total is best.
- ``cut_throat``: the points are added to every opponent who has the sector
  open; the lowest total is best.
"""

import logging
from dataclasses import replace
from typing import Dict, Mapping, Tuple

from ..models import ClosingScore, EvaluationResult, PlayerScore, Throw
from ..schemas import ClassicCricketSettings
from .base import RuleVariant

logger = logging.getLogger(__name__)


class ClassicCricket(RuleVariant):
    game_type = "classic_cricket"
    settings_type = ClassicCricketSettings
    score_type = ClosingScore

    def create_initial_score(self, player_id: str) -> ClosingScore:
        sectors = self.settings.scoring_sectors
        return ClosingScore(player_id=player_id, points=0, hits=(0,) * len(sectors))

    def evaluate_throw(
        self,
        player_id: str,
        throw: Throw,
        scores: Mapping[str, PlayerScore],
    ) -> EvaluationResult:
        player = self._score_for(scores, player_id)
        others = self._other_scores(scores, player_id)

        # No bust in cricket; misses simply use up a dart.
        sector = throw.sector
        if sector not in self.settings.scoring_sectors:
            return EvaluationResult.continued(player)

        cap = self.settings.hits_to_close_sector
        new_hits = throw.multiplier if self.settings.count_multipliers else 1

        current_hits = player.hits_on(sector)
        if current_hits < cap:
            updated = player.with_hits(sector, min(cap, current_hits + new_hits))
            additional_hits = max(0, current_hits + new_hits - cap)
        else:
            updated = player
            additional_hits = new_hits

        closed_all = updated.closed_all(cap)
        if additional_hits == 0 and not closed_all:
            return EvaluationResult.continued(updated)

        updated, changed = self._book_points(updated, others, sector, additional_hits * sector)

        if not closed_all:
            return EvaluationResult.continued(updated, changed)

        return self._resolve_closed(updated, {**others, **changed}, changed)

    def is_better(self, total: int, other_total: int) -> bool:
        """Whether ``total`` beats ``other_total`` under the scoring mode."""
        if self.settings.scoring == "cut_throat":
            return total < other_total
        return total > other_total

    def _book_points(
        self,
        player: ClosingScore,
        others: Mapping[str, ClosingScore],
        sector: int,
        amount: int,
    ) -> Tuple[ClosingScore, Dict[str, ClosingScore]]:
        cap = self.settings.hits_to_close_sector
        open_for = [pid for pid, score in others.items() if score.hits_on(sector) < cap]
        if amount == 0 or not open_for:
            return player, {}

        if self.settings.scoring == "cut_throat":
            penalised = {
                pid: replace(others[pid], points=others[pid].points + amount)
                for pid in open_for
            }
            logger.debug(
                "%s hit %d for %d penalty against %s",
                player.player_id,
                sector,
                amount,
                ", ".join(open_for),
            )
            return player, penalised

        logger.debug("%s scored %d on %d", player.player_id, amount, sector)
        return replace(player, points=player.points + amount), {}

    def _resolve_closed(
        self,
        player: ClosingScore,
        others: Mapping[str, ClosingScore],
        changed: Dict[str, ClosingScore],
    ) -> EvaluationResult:
        """Decide a throw by a player who has every sector closed.

        Anyone with a better total keeps the game going. Equal totals are a
        tie only against players who have closed everything too; an open
        player level on points loses to the first to close.
        """
        cap = self.settings.hits_to_close_sector

        if any(self.is_better(o.points, player.points) for o in others.values()):
            return EvaluationResult.continued(player, changed)

        level = [
            pid
            for pid, o in others.items()
            if o.points == player.points and o.closed_all(cap)
        ]
        if level:
            logger.info(
                "%s tied with %s on %d points", player.player_id, ", ".join(level), player.points
            )
            return EvaluationResult.tie(player, changed)

        logger.info("%s closed every sector and won on %d points", player.player_id, player.points)
        return EvaluationResult.win(player, changed)


def init_variant(config: Dict) -> ClassicCricket:
    return ClassicCricket(ClassicCricketSettings.model_validate(config))

"""Free-for-all countdown engine.

Two to four players race through legs; every leg restarts all players from
``score_per_leg`` and the first to ``legs_to_win_match`` legs wins. There is
no win-by-two rule.
"""

from typing import Dict, Mapping

from ..models import CountdownScore
from ..schemas import FreeForAllSettings
from .classic_legs import ClassicLegs


class FreeForAll(ClassicLegs):
    game_type = "free_for_all"
    settings_type = FreeForAllSettings

    def is_match_won(self, legs_won: int, others: Mapping[str, CountdownScore]) -> bool:
        return legs_won >= self.settings.legs_to_win_match


def init_variant(config: Dict) -> FreeForAll:
    return FreeForAll(FreeForAllSettings.model_validate(config))

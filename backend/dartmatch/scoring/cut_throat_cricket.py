"""Cut-throat cricket scoring engine.

Cricket for two to four players where scoring hits are penalties: they are
added to every opponent who has not closed the sector, and the lowest total
wins once a player has closed everything.
"""

from typing import Dict

from ..schemas import CutThroatCricketSettings
from .classic_cricket import ClassicCricket


class CutThroatCricket(ClassicCricket):
    game_type = "cut_throat_cricket"
    settings_type = CutThroatCricketSettings


def init_variant(config: Dict) -> CutThroatCricket:
    return CutThroatCricket(CutThroatCricketSettings.model_validate(config))

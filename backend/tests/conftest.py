import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dartmatch.models import ClosingScore  # noqa: E402


def _closing_score(player_id, points=0, closed=(), **hits):
    score = ClosingScore(player_id=player_id, points=points)
    for sector in closed:
        score = score.with_hits(sector, 3)
    for key, count in hits.items():
        sector = 25 if key == "bull" else int(key.lstrip("s"))
        score = score.with_hits(sector, count)
    return score


@pytest.fixture
def closing_score():
    """Builder for cricket scores.

    ``closed`` lists sectors set to three hits; keyword arguments such as
    ``s20=2`` or ``bull=1`` set explicit hit counts.
    """
    return _closing_score

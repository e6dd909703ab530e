import logging
import os

logger = logging.getLogger(__name__)

BULLSEYE = 25
SCORING_SECTORS = (15, 16, 17, 18, 19, 20, BULLSEYE)
ALLOWED_STARTING_SCORES = (201, 301, 401, 501, 601, 701, 801, 901)
MAX_DARTS_PER_TURN = 3


def _parse_darts_per_turn(env_var: str, default: int = MAX_DARTS_PER_TURN) -> int:
    """
    Read the default number of darts per turn from the environment:
      - defaults to ``default`` when unset/empty
      - falls back to ``default`` (with a warning) on non-integers
      - falls back to ``default`` (with a warning) outside 1..MAX_DARTS_PER_TURN
    """
    raw_value = (os.getenv(env_var) or "").strip()
    if not raw_value:
        return default

    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid integer (got %r); defaulting to %d",
            env_var,
            raw_value,
            default,
        )
        return default

    if not 1 <= value <= MAX_DARTS_PER_TURN:
        logger.warning(
            "%s must be between 1 and %d; defaulting to %d",
            env_var,
            MAX_DARTS_PER_TURN,
            default,
        )
        return default

    return value


DEFAULT_DARTS_PER_TURN = _parse_darts_per_turn("DARTMATCH_DARTS_PER_TURN")

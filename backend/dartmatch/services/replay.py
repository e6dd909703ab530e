"""Rebuild a match from a recorded throw sequence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence, Tuple, Union

from ..match import Match
from ..models import Throw, ThrowRecord
from ..schemas import ThrowIn

if TYPE_CHECKING:  # pragma: no cover
    from ..scoring.base import RuleVariant

logger = logging.getLogger(__name__)

ThrowEntry = Union[ThrowRecord, Tuple[str, Throw], Mapping]


def _coerce(entry: ThrowEntry) -> Tuple[str, Throw]:
    if isinstance(entry, ThrowRecord):
        return entry.player_id, entry.throw
    if isinstance(entry, Mapping):
        parsed = ThrowIn.model_validate(entry)
        return parsed.player_id, parsed.to_throw()
    player_id, throw = entry
    return player_id, throw


def replay_throws(
    variant: "RuleVariant",
    player_ids: Sequence[str],
    throws: Iterable[ThrowEntry],
    **match_kwargs,
) -> Match:
    """Replay ``throws`` in order on a fresh match and return it.

    Items may be ``ThrowRecord`` objects, ``(player_id, Throw)`` pairs or raw
    mappings with ``playerId``/``sector``/``multiplier`` keys. Errors propagate
    unchanged; the partially replayed match is discarded.
    """

    match = Match(variant, player_ids, **match_kwargs)
    count = 0
    for entry in throws:
        player_id, throw = _coerce(entry)
        match.register_throw(player_id, throw)
        count += 1

    logger.debug("Replayed %d throws into match %s", count, match.id)
    return match

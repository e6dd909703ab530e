"""Rule variants for the supported dart games."""

from typing import Mapping, Optional

from pydantic import ValidationError

from ..exceptions import InvalidSettingsError, UnknownGameTypeError
from . import classic_cricket, classic_legs, classic_sets, cut_throat_cricket, free_for_all
from .base import CountdownVariant, RuleVariant
from .classic_cricket import ClassicCricket
from .classic_legs import ClassicLegs
from .classic_sets import ClassicSets
from .cut_throat_cricket import CutThroatCricket
from .free_for_all import FreeForAll

_ENGINES = {
    "classic_legs": classic_legs,
    "classic_sets": classic_sets,
    "free_for_all": free_for_all,
    "classic_cricket": classic_cricket,
    "cut_throat_cricket": cut_throat_cricket,
}

GAME_TYPES = tuple(_ENGINES)


def normalize_game_type(game_type: str) -> str:
    """Normalize and validate a game type identifier."""

    value = (game_type or "").strip().lower().replace("-", "_").replace(" ", "_")
    if value not in _ENGINES:
        raise UnknownGameTypeError(game_type)
    return value


def create_variant(game_type: str, config: Optional[Mapping] = None) -> RuleVariant:
    """Build the rule variant for ``game_type`` from a raw config mapping."""

    key = normalize_game_type(game_type)
    engine = _ENGINES[key]
    try:
        return engine.init_variant(dict(config or {}))
    except ValidationError as exc:
        raise InvalidSettingsError(key, exc.errors()) from exc


__all__ = [
    "GAME_TYPES",
    "ClassicCricket",
    "ClassicLegs",
    "ClassicSets",
    "CountdownVariant",
    "CutThroatCricket",
    "FreeForAll",
    "RuleVariant",
    "create_variant",
    "normalize_game_type",
]

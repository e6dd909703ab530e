from typing import Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .config import (
    ALLOWED_STARTING_SCORES,
    DEFAULT_DARTS_PER_TURN,
    MAX_DARTS_PER_TURN,
    SCORING_SECTORS,
)
from .models import Throw

CricketScoring = Literal["standard", "cut_throat"]


class _Settings(BaseModel):
    """Common configuration for every game type.

    Accepts both ``snake_case`` field names and the ``camelCase`` keys used by
    stored rule-set configs (``dartsPerTurn``, ``scorePerLeg``...).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    darts_per_turn: int = Field(
        default_factory=lambda: DEFAULT_DARTS_PER_TURN,
        ge=1,
        le=MAX_DARTS_PER_TURN,
    )


class _CountdownSettings(_Settings):
    score_per_leg: int = 501
    double_out_enabled: bool = False

    @field_validator("score_per_leg")
    @classmethod
    def _validate_score_per_leg(cls, value: int) -> int:
        if value not in ALLOWED_STARTING_SCORES:
            allowed = ", ".join(str(v) for v in ALLOWED_STARTING_SCORES)
            raise ValueError(f"score per leg must be one of: {allowed}")
        return value


class ClassicLegsSettings(_CountdownSettings):
    legs_to_win_match: int = Field(default=3, ge=1, le=18)
    advantages_enabled: bool = False
    sudden_death_winning_leg: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_sudden_death(self) -> "ClassicLegsSettings":
        if (
            self.advantages_active
            and self.sudden_death_winning_leg is not None
            and self.sudden_death_winning_leg <= self.legs_to_win_match
        ):
            raise ValueError(
                "sudden death winning leg must be greater than legs to win the match"
            )
        return self

    @property
    def advantages_active(self) -> bool:
        # Win-by-two is meaningless in a single-leg match.
        return self.advantages_enabled and self.legs_to_win_match > 1

    @property
    def sudden_death_cap(self) -> Optional[int]:
        if not self.advantages_active:
            return None
        if self.sudden_death_winning_leg is None:
            return self.legs_to_win_match + 2
        return self.sudden_death_winning_leg


class ClassicSetsSettings(_CountdownSettings):
    legs_to_win_set: int = Field(default=3, ge=2, le=4)
    sets_to_win_match: int = Field(default=3, ge=3, le=7)
    advantages_enabled: bool = False
    sudden_death_winning_leg: int = Field(default=6, ge=1)

    @model_validator(mode="after")
    def _check_sudden_death(self) -> "ClassicSetsSettings":
        if self.advantages_enabled and self.sudden_death_winning_leg <= self.legs_to_win_set:
            raise ValueError(
                "sudden death winning leg must be greater than legs to win a set"
            )
        return self


class FreeForAllSettings(_CountdownSettings):
    legs_to_win_match: int = Field(default=3, ge=1, le=18)


class _CricketSettings(_Settings):
    hits_to_close_sector: int = Field(default=3, ge=1, le=5)
    count_multipliers: bool = True
    scoring: CricketScoring

    @property
    def scoring_sectors(self) -> tuple[int, ...]:
        return SCORING_SECTORS


class ClassicCricketSettings(_CricketSettings):
    scoring: CricketScoring = "standard"


class CutThroatCricketSettings(_CricketSettings):
    scoring: CricketScoring = "cut_throat"


class ThrowIn(BaseModel):
    """A throw as stored by history collaborators."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    player_id: str = Field(..., min_length=1, alias="playerId")
    sector: StrictInt
    multiplier: StrictInt = 1

    @field_validator("player_id", mode="before")
    @classmethod
    def _validate_player_id(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("playerId must be a string")
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("playerId must not be empty")
        return trimmed

    def to_throw(self) -> Throw:
        return Throw(self.sector, self.multiplier)

from typing import Any, Optional


class DomainException(Exception):
    """Base class for recoverable domain errors."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.code = code


class InvalidHitError(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid hit",
            detail=detail,
            code="invalid_hit",
        )


class InvalidSettingsError(DomainException):
    def __init__(self, game_type: str, errors: Optional[list[Any]] = None) -> None:
        self.errors = list(errors or [])
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in self.errors
            if isinstance(err, dict)
        )
        super().__init__(
            title="Invalid settings",
            detail=f"invalid settings for '{game_type}'" + (f": {messages}" if messages else ""),
            code="invalid_settings",
        )


class UnknownGameTypeError(DomainException):
    def __init__(self, game_type: str) -> None:
        super().__init__(
            title="Unknown game type",
            detail=f"game type '{game_type}' is not supported",
            code="unknown_game_type",
        )


class RosterError(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid roster",
            detail=detail,
            code="invalid_roster",
        )


class TurnProtocolError(DomainException):
    """Raised when a throw is submitted out of sequence."""


class NotCurrentTurnError(TurnProtocolError):
    def __init__(self, player_id: str, current_player: str) -> None:
        self.player_id = player_id
        self.current_player = current_player
        super().__init__(
            title="Not current turn",
            detail=f"player '{player_id}' cannot throw; waiting for '{current_player}'",
            code="not_current_turn",
        )


class GameFinishedError(TurnProtocolError):
    def __init__(self, match_id: str) -> None:
        super().__init__(
            title="Game finished",
            detail=f"match '{match_id}' is already finished",
            code="game_finished",
        )


class UnknownPlayerError(DomainException):
    def __init__(self, player_id: str) -> None:
        super().__init__(
            title="Player not found",
            detail=f"player '{player_id}' is not part of this match",
            code="unknown_player",
        )


class ScoreStateError(RuntimeError):
    """A score entry is missing or does not belong to the active game type.

    This signals an integration bug and is never handled inside the package.
    """

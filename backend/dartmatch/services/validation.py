from typing import Dict, List, Sequence

from ..exceptions import RosterError

GAME_RULES: dict[str, dict[str, int]] = {
    "classic_legs": {"min_players": 2, "max_players": 2},
    "classic_sets": {"min_players": 2, "max_players": 2},
    "free_for_all": {"min_players": 2, "max_players": 4},
    "classic_cricket": {"min_players": 2, "max_players": 2},
    "cut_throat_cricket": {"min_players": 2, "max_players": 4},
}


def _game_label(game_type: str) -> str:
    return game_type.replace("_", " ").title() or "Game"


def unique_player_ids(player_ids: Sequence[str]) -> List[str]:
    """Return ``player_ids`` as a list, rejecting blanks and duplicates."""

    if isinstance(player_ids, (str, bytes)):
        raise RosterError("Players must be provided as a sequence of ids.")

    seen: Dict[str, None] = {}
    for index, pid in enumerate(player_ids, start=1):
        if not isinstance(pid, str):
            raise RosterError(f"Player #{index} id must be a string.")
        if not pid.strip():
            raise RosterError(f"Player #{index} id must not be empty.")
        if pid in seen:
            raise RosterError(f"Player '{pid}' appears more than once.")
        seen[pid] = None
    return list(seen.keys())


def validate_roster(game_type: str, player_ids: Sequence[str]) -> List[str]:
    """Validate the participant list for ``game_type``.

    Rules:
    - Ids must be non-empty strings and unique
    - The player count must be within the game's ``min_players``/``max_players``
    """

    players = unique_player_ids(player_ids)

    rules = GAME_RULES.get(game_type)
    if not rules:
        return players

    count = len(players)
    min_players = rules["min_players"]
    max_players = rules["max_players"]

    if min_players == max_players and count != min_players:
        raise RosterError(
            f"{_game_label(game_type)} requires exactly {min_players} players."
        )
    if count < min_players:
        raise RosterError(
            f"{_game_label(game_type)} requires at least {min_players} players."
        )
    if count > max_players:
        raise RosterError(
            f"{_game_label(game_type)} supports at most {max_players} players."
        )

    return players

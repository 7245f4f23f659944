# roster_core/validation.py
from __future__ import annotations
from collections import Counter
from typing import Dict, Optional, Sequence

from .errors import LocalValidationError
from .models import AppConfig, Player

DUPLICATE_DNI = "Duplicate DNI in this form."
MISSING_TEAM_NAME = "Team name is required."
MISSING_PLAYER_FIELDS = "Every player field (first name, last name, DNI) is required."
HAS_DUPLICATES = "There are duplicate DNIs in the form. Please fix them."

def find_duplicate_dnis(players: Sequence[Player]) -> Dict[int, str]:
    """
    Map every index whose trimmed DNI occurs more than once to an error message.
    Empty DNIs are never duplicates. All occurrences are flagged, not only the later ones.
    """
    dnis = [(p.dni or "").strip() for p in players]
    counts = Counter(d for d in dnis if d)
    return {i: DUPLICATE_DNI for i, d in enumerate(dnis) if d and counts[d] > 1}

def check_required_fields(team_name: str, players: Sequence[Player]) -> Optional[str]:
    if not (team_name or "").strip():
        return MISSING_TEAM_NAME
    for p in players:
        if not p.first_name.strip() or not p.last_name.strip() or not p.dni.strip():
            return MISSING_PLAYER_FIELDS
    return None

def check_roster_size(count: int, min_players: int, max_players: int) -> Optional[str]:
    if count < min_players:
        return f"At least {min_players} player(s) required."
    if count > max_players:
        return f"At most {max_players} players allowed (got {count})."
    return None

def _validate(team_name: str, players: Sequence[Player], min_players: int, max_players: int) -> None:
    for msg in (
        check_roster_size(len(players), min_players, max_players),
        check_required_fields(team_name, players),
        HAS_DUPLICATES if find_duplicate_dnis(players) else None,
    ):
        if msg:
            raise LocalValidationError(msg)

def validate_registration(team_name: str, players: Sequence[Player], config: AppConfig) -> None:
    _validate(team_name, players, max(config.min_players, 1), config.max_players)

def validate_edit(team_name: str, players: Sequence[Player], config: AppConfig) -> None:
    # an edited team may be left empty
    _validate(team_name, players, 0, config.max_players)

# roster_core/editor.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

from .models import AppConfig, Player, Snapshot
from .validation import find_duplicate_dnis

EDITABLE = ("first_name", "last_name", "dni")

class RosterEditor:
    """
    Mutable working copy of a team name and its players.

    Every mutation goes through a method here and recomputes the duplicate-DNI errors,
    so `errors` always matches `players`.
    """

    def __init__(self, team_name: str = "", players: Optional[Sequence[Player]] = None,
                 max_players: int = 8, min_players: int = 1):
        self.team_name = team_name
        self.max_players = max_players
        self.min_players = min_players
        self._players: List[Player] = list(players) if players is not None else [Player()]
        self._errors: Dict[int, str] = {}
        self._revalidate()

    @classmethod
    def blank(cls, config: AppConfig) -> "RosterEditor":
        return cls("", None, max_players=config.max_players, min_players=max(config.min_players, 1))

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, config: AppConfig) -> "RosterEditor":
        # players are frozen, so sharing them with the snapshot is safe
        return cls(snapshot.name, snapshot.players, max_players=config.max_players, min_players=0)

    def _revalidate(self) -> None:
        self._errors = find_duplicate_dnis(self._players)

    # ---- read side ----
    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def errors(self) -> Dict[int, str]:
        return dict(self._errors)

    @property
    def can_add(self) -> bool:
        return len(self._players) < self.max_players

    @property
    def can_remove(self) -> bool:
        return len(self._players) > self.min_players

    @property
    def can_submit(self) -> bool:
        return not self._errors

    # ---- mutations ----
    def set_team_name(self, name: str) -> None:
        self.team_name = name

    def update_player(self, index: int, **fields: str) -> None:
        unknown = set(fields) - set(EDITABLE)
        if unknown:
            raise KeyError(f"Not editable: {sorted(unknown)}")
        self._players[index] = self._players[index].model_copy(update=fields)
        self._revalidate()

    def add_player(self) -> bool:
        if not self.can_add:
            return False
        self._players.append(Player())
        self._revalidate()
        return True

    def remove_player(self, index: int) -> bool:
        if not self.can_remove:
            return False
        del self._players[index]
        self._revalidate()
        return True

    def reset(self) -> None:
        self.team_name = ""
        self._players = [Player()]
        self._revalidate()

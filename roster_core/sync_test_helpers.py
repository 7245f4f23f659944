"""
Internal helpers for tests (not imported by app).
"""
from __future__ import annotations
import itertools
import threading
from typing import Dict, List, Optional, Tuple

from .errors import RequestFailure, TeamNotFound, TransportFailure
from .models import Player, Team

def quick_player(first: str = "", last: str = "", dni: str = "", pid=None) -> Player:
    return Player(id=pid, first_name=first, last_name=last, dni=dni)

class FakeApiClient:
    """
    In-memory stand-in for ApiClient. Records every call as (method, args) and can be
    told to fail specific calls via `fail`: {(method, key): exception}, where key is the
    player's DNI for player calls and the team name / id for team calls.
    """

    def __init__(self, teams: Optional[List[Team]] = None):
        self.teams: Dict[object, Team] = {t.id: t for t in (teams or [])}
        self.calls: List[Tuple[str, tuple]] = []
        self.fail: Dict[Tuple[str, object], Exception] = {}
        self._ids = itertools.count(100)
        self._lock = threading.Lock()

    def _record(self, method: str, args: tuple, key: object) -> None:
        with self._lock:
            self.calls.append((method, args))
        exc = self.fail.get((method, key))
        if exc is not None:
            raise exc

    def methods(self) -> List[str]:
        return [m for m, _ in self.calls]

    def _next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def _find_player(self, player_id) -> Tuple[Team, int]:
        for t in self.teams.values():
            for i, p in enumerate(t.players):
                if p.id == player_id:
                    return t, i
        raise RequestFailure(404, "Jugador no encontrado", "PATCH", f"/jugadores/{player_id}")

    def create_team(self, name: str) -> Team:
        self._record("create_team", (name,), name)
        tid = self._next_id()
        team = Team(id=tid, name=name, recovery_code=f"R{tid}", players=[])
        self.teams[tid] = team
        return team

    def list_teams(self) -> List[Team]:
        self._record("list_teams", (), None)
        return [t.model_copy(deep=True) for t in self.teams.values()]

    def fetch_team_by_code(self, code: str) -> Team:
        self._record("fetch_team_by_code", (code,), code)
        for t in self.teams.values():
            if t.recovery_code == code:
                return t.model_copy(deep=True)
        raise TeamNotFound(code)

    def update_team_name(self, team_id, name: str):
        self._record("update_team_name", (team_id, name), team_id)
        self.teams[team_id].name = name
        return {"id_equipo": team_id, "nombre_equipo": name}

    def delete_team(self, team_id) -> None:
        self._record("delete_team", (team_id,), team_id)
        self.teams.pop(team_id, None)

    def create_player(self, team_id, player: Player) -> Player:
        self._record("create_player", (team_id, player), player.dni)
        created = player.model_copy(update={"id": self._next_id()})
        self.teams[team_id].players.append(created)
        return created

    def update_player(self, player_id, player: Player):
        self._record("update_player", (player_id, player), player.dni)
        team, i = self._find_player(player_id)
        team.players[i] = player.model_copy(update={"id": player_id})
        return team.players[i].model_dump(by_alias=True)

    def delete_player(self, player_id) -> None:
        self._record("delete_player", (player_id,), player_id)
        team, i = self._find_player(player_id)
        del team.players[i]

def conflict(message: str) -> RequestFailure:
    return RequestFailure(409, message, "POST", "/jugadores")

def offline(reason: str = "connection refused") -> TransportFailure:
    return TransportFailure(reason, "POST", "/jugadores")

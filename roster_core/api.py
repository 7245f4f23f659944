# roster_core/api.py
from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .errors import RequestFailure, TeamNotFound, TransportFailure
from .models import Player, PlayerId, Team

logger = logging.getLogger(__name__)

def _reason_from(resp: requests.Response) -> Optional[str]:
    # the service reports failures as {"message": "..."}; anything else has no reason
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None

class ApiClient:
    """
    Blocking client for the team registration service. Every method issues exactly one
    request and raises RequestFailure / TransportFailure; nothing is retried.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, json: Optional[dict] = None,
                 parse: Optional[Callable[[Any], Any]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportFailure(str(exc), method, url) from exc

        if not resp.ok:
            reason = _reason_from(resp)
            logger.warning("%s %s -> %s %s", method, url, resp.status_code, reason or "")
            raise RequestFailure(resp.status_code, reason, method, url)

        data = None
        if resp.status_code != 204 and resp.content:
            try:
                data = resp.json()
            except ValueError as exc:
                raise RequestFailure(resp.status_code, "Invalid JSON in response", method, url) from exc
        if parse is None:
            return data
        try:
            return parse(data)
        except (ValidationError, TypeError) as exc:
            logger.warning("%s %s -> unexpected body: %s", method, url, exc)
            raise RequestFailure(resp.status_code, "Unexpected response from service", method, url) from exc

    # ---- teams ----
    def create_team(self, name: str) -> Team:
        return self._request("POST", "/equipos", {"nombre_equipo": name}, parse=Team.model_validate)

    def list_teams(self) -> List[Team]:
        def parse(data):
            if data is None:
                return []
            if not isinstance(data, list):
                raise TypeError(f"expected a list of teams, got {type(data).__name__}")
            return [Team.model_validate(t) for t in data]
        return self._request("GET", "/equipos", parse=parse)

    def fetch_team_by_code(self, code: str) -> Team:
        try:
            return self._request("GET", f"/equipos/recuperar/{quote(code, safe='')}", parse=Team.model_validate)
        except RequestFailure as exc:
            if exc.status_code == 404:
                raise TeamNotFound(code, exc.method, exc.url) from exc
            raise

    def update_team_name(self, team_id: PlayerId, name: str) -> Any:
        return self._request("PATCH", f"/equipos/{team_id}", {"nombre_equipo": name})

    def delete_team(self, team_id: PlayerId) -> None:
        self._request("DELETE", f"/equipos/{team_id}")

    # ---- players ----
    def create_player(self, team_id: PlayerId, player: Player) -> Player:
        body = {"id_equipo": team_id, **player.to_payload()}
        return self._request("POST", "/jugadores", body, parse=lambda d: Player.model_validate(d) if d else player)

    def update_player(self, player_id: PlayerId, player: Player) -> Any:
        return self._request("PATCH", f"/jugadores/{player_id}", player.to_payload())

    def delete_player(self, player_id: PlayerId) -> None:
        self._request("DELETE", f"/jugadores/{player_id}")

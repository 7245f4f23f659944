# roster_core/teams.py
from __future__ import annotations
import logging
from typing import List

from .api import ApiClient
from .errors import RequestFailure
from .models import Player, Team

logger = logging.getLogger(__name__)

def load_teams(client: ApiClient) -> List[Team]:
    """All teams with nested players, alphabetical by name."""
    return sorted(client.list_teams(), key=lambda t: t.name.casefold())

def remove_team(client: ApiClient, team: Team) -> None:
    try:
        client.delete_team(team.id)
    except RequestFailure as exc:
        # the service may refuse while players still reference the team
        if exc.status_code in (400, 409) and not exc.reason:
            reason = f'Could not delete team "{team.name}" (it may still have players).'
            raise RequestFailure(exc.status_code, reason, exc.method, exc.url) from exc
        raise
    logger.info("deleted team %s (%s)", team.id, team.name)

def remove_player(client: ApiClient, player: Player) -> None:
    if player.id is None:
        raise ValueError("Player has no id; it was never saved.")
    client.delete_player(player.id)
    logger.info("deleted player %s", player.id)

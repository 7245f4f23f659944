# roster_core/sync.py
"""
Diff-and-Sync: turn a registration form or an edited roster into service requests.

All independent requests of one operation are dispatched before any is awaited and
every one of them is allowed to settle; a failure never cancels its siblings.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .api import ApiClient
from .diff import compute_changes
from .errors import (
    AggregateError,
    LocalValidationError,
    RegistrationError,
    RequestFailure,
    TransportFailure,
)
from .models import AppConfig, Player, RegistrationResult, Snapshot
from .validation import validate_edit, validate_registration

logger = logging.getLogger(__name__)

DUPLICATE_TEAM_MARKERS = ("nombre de equipo", "team name")
DUPLICATE_DNI_MARKERS = ("dni",)

Call = Tuple[Callable[..., Any], tuple]

async def settle(calls: Sequence[Call]) -> List[Any]:
    """
    Run blocking client calls concurrently and return one outcome per call, in order.
    An outcome is the call's return value or the RequestFailure/TransportFailure it raised.
    """
    results = await asyncio.gather(
        *(asyncio.to_thread(fn, *args) for fn, args in calls),
        return_exceptions=True,
    )
    for r in results:
        if isinstance(r, BaseException) and not isinstance(r, (RequestFailure, TransportFailure)):
            raise r
    return list(results)

def _failed(outcome: Any) -> bool:
    return isinstance(outcome, (RequestFailure, TransportFailure))

def _player_failure(player: Player, exc: Exception) -> str:
    if isinstance(exc, RequestFailure) and exc.mentions(*DUPLICATE_DNI_MARKERS):
        return f"DNI {player.dni} is already registered: {exc.describe()}"
    return exc.describe()

def _team_failure(name: str, exc: Exception) -> str:
    if isinstance(exc, RequestFailure):
        if exc.mentions(*DUPLICATE_TEAM_MARKERS):
            return f'Team name "{name}" is already taken: {exc.reason}'
        return f"Error creating team ({exc.status_code}): {exc.reason or 'Unknown error'}"
    return exc.describe()

async def register(client: ApiClient, team_name: str, players: Sequence[Player], config: AppConfig) -> RegistrationResult:
    validate_registration(team_name, players, config)

    try:
        team = await asyncio.to_thread(client.create_team, team_name)
    except (RequestFailure, TransportFailure) as exc:
        raise RegistrationError(_team_failure(team_name, exc)) from exc
    logger.info("created team %s (%s)", team.id, team.name)

    outcomes = await settle([(client.create_player, (team.id, p)) for p in players])
    failures = [
        f"Player {i} ({p.first_name}): {_player_failure(p, out)}"
        for i, (p, out) in enumerate(zip(players, outcomes), start=1)
        if _failed(out)
    ]
    if failures:
        # the team stays on the server: there is no compensating delete
        logger.warning("team %s created with %d failed player(s)", team.id, len(failures))
        raise AggregateError(f'Team "{team.name}" created, but registering players failed:', failures)

    return RegistrationResult(
        team_id=team.id,
        name=team.name,
        recovery_code=team.recovery_code,
        players_registered=len(players),
    )

async def load_team(client: ApiClient, code: str) -> Snapshot:
    code = (code or "").strip()
    if not code:
        raise LocalValidationError("Please enter a recovery code.")
    team = await asyncio.to_thread(client.fetch_team_by_code, code)
    snapshot = Snapshot.from_team(team)
    if snapshot.recovery_code is None:
        # later refetches go through the code that found the team
        snapshot = snapshot.model_copy(update={"recovery_code": code})
    return snapshot

async def save(client: ApiClient, original: Snapshot, team_name: str, players: Sequence[Player], config: AppConfig) -> Snapshot:
    validate_edit(team_name, players, config)

    changes = compute_changes(original, team_name, players)
    if changes.is_empty:
        return original
    logger.info(
        "saving team %s: rename=%s creates=%d deletes=%d updates=%d",
        original.team_id, changes.team_name is not None,
        len(changes.creates), len(changes.deletes), len(changes.updates),
    )

    calls: List[Call] = []
    labels: List[Tuple[str, Optional[Player]]] = []
    if changes.team_name is not None:
        calls.append((client.update_team_name, (original.team_id, changes.team_name)))
        labels.append(("Team", None))
    for p in changes.creates:
        calls.append((client.create_player, (original.team_id, p)))
        labels.append((f"Adding {p.first_name}", p))
    for p in changes.deletes:
        calls.append((client.delete_player, (p.id,)))
        labels.append((f"Deleting {p.first_name}", p))
    for p in changes.updates:
        calls.append((client.update_player, (p.id, p)))
        labels.append((f"Updating {p.first_name}", p))

    outcomes = await settle(calls)
    failures: List[str] = []
    for (label, player), out in zip(labels, outcomes):
        if not _failed(out):
            continue
        text = _player_failure(player, out) if player is not None else out.describe()
        failures.append(f"{label}: {text}")
    if failures:
        raise AggregateError("Errors while saving:", failures)

    return await load_team(client, original.recovery_code or "")

# roster_core/diff.py
from __future__ import annotations
from typing import Sequence

from .models import ChangeSet, Player, Snapshot

def compute_changes(original: Snapshot, team_name: str, players: Sequence[Player]) -> ChangeSet:
    """
    Diff an edited roster against the snapshot it was loaded from.

    Players are matched by server id only, so order does not matter. Rows without an id
    are creates; ids present in the snapshot but gone from the edit are deletes; ids on
    both sides with different editable fields are updates.
    """
    by_id = original.player_by_id()
    kept_ids = {p.id for p in players if p.id is not None}

    creates = [p for p in players if p.is_new]
    deletes = [p for p in original.players if p.id is not None and p.id not in kept_ids]
    updates = [
        p for p in players
        if p.id is not None and p.id in by_id and p.editable_fields() != by_id[p.id].editable_fields()
    ]
    return ChangeSet(
        team_name=team_name if team_name != original.name else None,
        creates=creates,
        deletes=deletes,
        updates=updates,
    )

from roster_core.diff import compute_changes
from roster_core.models import Snapshot
from roster_core.sync_test_helpers import quick_player

def _snapshot():
    return Snapshot(
        team_id=1, name="A", recovery_code="R1",
        players=(quick_player("Juan", "Perez", "10", pid=10), quick_player("Ana", "Gomez", "11", pid=11)),
    )

def test_no_changes_even_when_reordered():
    snap = _snapshot()
    changes = compute_changes(snap, "A", list(reversed(snap.players)))
    assert changes.is_empty
    assert changes.request_count == 0

def test_one_delete_per_removed_id():
    snap = _snapshot()
    changes = compute_changes(snap, "A", [snap.players[0]])
    assert [p.id for p in changes.deletes] == [11]
    assert not changes.creates and not changes.updates

def test_one_create_per_row_without_id():
    snap = _snapshot()
    new = [quick_player("X", "Y", "20"), quick_player("Z", "W", "21")]
    changes = compute_changes(snap, "A", list(snap.players) + new)
    assert changes.creates == new
    assert not changes.deletes and not changes.updates

def test_update_only_when_fields_differ():
    snap = _snapshot()
    edited = [snap.players[0].model_copy(update={"last_name": "Perez Diaz"}), snap.players[1]]
    changes = compute_changes(snap, "A", edited)
    assert [p.id for p in changes.updates] == [10]
    assert changes.updates[0].last_name == "Perez Diaz"

def test_team_rename_detected():
    changes = compute_changes(_snapshot(), "B", list(_snapshot().players))
    assert changes.team_name == "B"
    assert changes.request_count == 1

def test_scenario_delete_and_edit():
    snap = _snapshot()
    edited = [snap.players[0].model_copy(update={"last_name": "Lopez"})]
    changes = compute_changes(snap, "A", edited)
    assert [p.id for p in changes.deletes] == [11]
    assert [p.id for p in changes.updates] == [10]
    assert changes.creates == [] and changes.team_name is None

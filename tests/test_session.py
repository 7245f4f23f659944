import asyncio

import pytest
from roster_core.errors import AggregateError, TeamNotFound
from roster_core.models import AppConfig, Team
from roster_core.session import RecoverySession, RegistrationSession
from roster_core.sync_test_helpers import FakeApiClient, conflict, quick_player

CFG = AppConfig()

def test_registration_resets_form_on_success():
    client = FakeApiClient()
    s = RegistrationSession(client, CFG)
    s.editor.set_team_name("Condors")
    s.editor.update_player(0, first_name="Juan", last_name="Perez", dni="123")
    result = asyncio.run(s.submit())
    assert result.recovery_code
    assert s.editor.team_name == ""
    assert len(s.editor.players) == 1 and s.editor.players[0].dni == ""
    assert "Condors" in s.success_message

def test_registration_keeps_form_on_failure():
    client = FakeApiClient()
    client.fail[("create_player", "123")] = conflict("DNI ya registrado")
    s = RegistrationSession(client, CFG)
    s.editor.set_team_name("Condors")
    s.editor.update_player(0, first_name="Juan", last_name="Perez", dni="123")
    with pytest.raises(AggregateError):
        asyncio.run(s.submit())
    assert s.editor.team_name == "Condors"
    assert s.editor.players[0].dni == "123"
    assert s.last_result is None

def _recovery():
    team = Team(id=1, name="A", recovery_code="R1",
                players=[quick_player("Juan", "Perez", "10", pid=10), quick_player("Ana", "Gomez", "11", pid=11)])
    client = FakeApiClient([team])
    s = RecoverySession(client, CFG)
    asyncio.run(s.load("R1"))
    return client, s

def test_failed_save_leaves_edits_for_retry():
    client, s = _recovery()
    s.editor.set_team_name("B")
    s.editor.add_player()
    s.editor.update_player(2, first_name="New", last_name="Guy", dni="12")
    client.fail[("create_player", "12")] = conflict("DNI duplicado")
    before = s.editor.players
    with pytest.raises(AggregateError):
        asyncio.run(s.save())
    assert s.editor.players == before
    assert s.editor.team_name == "B"
    assert s.snapshot.name == "A"

def test_successful_save_replaces_snapshot_and_editor():
    client, s = _recovery()
    s.editor.remove_player(1)
    asyncio.run(s.save())
    assert [p.id for p in s.snapshot.players] == [10]
    assert s.editor.players == s.snapshot.players

def test_failed_lookup_clears_state():
    _, s = _recovery()
    with pytest.raises(TeamNotFound):
        asyncio.run(s.load("missing"))
    assert not s.loaded and s.editor is None

def test_recovery_code_missing_from_service():
    class NoCodeClient(FakeApiClient):
        def create_team(self, name):
            return super().create_team(name).model_copy(update={"recovery_code": None})
    s = RegistrationSession(NoCodeClient(), CFG)
    assert s.recovery_code is None
    s.editor.set_team_name("Condors")
    s.editor.update_player(0, first_name="Juan", last_name="Perez", dni="123")
    asyncio.run(s.submit())
    assert s.last_result is not None
    assert s.recovery_code is None

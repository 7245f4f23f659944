import pytest
from roster_core.errors import RequestFailure
from roster_core.models import Team
from roster_core.sync_test_helpers import FakeApiClient, quick_player
from roster_core.teams import load_teams, remove_player, remove_team

def test_teams_sorted_by_name():
    client = FakeApiClient([Team(id=1, name="zeta"), Team(id=2, name="Alpha"), Team(id=3, name="beta")])
    assert [t.name for t in load_teams(client)] == ["Alpha", "beta", "zeta"]

def test_remove_team_friendly_conflict():
    team = Team(id=1, name="A")
    client = FakeApiClient([team])
    client.fail[("delete_team", 1)] = RequestFailure(409, None, "DELETE", "/equipos/1")
    with pytest.raises(RequestFailure, match="may still have players"):
        remove_team(client, team)

def test_remove_player():
    p = quick_player("a", "b", "1", pid=5)
    client = FakeApiClient([Team(id=1, name="A", players=[p])])
    remove_player(client, p)
    assert client.teams[1].players == []
    with pytest.raises(ValueError):
        remove_player(client, quick_player("new"))

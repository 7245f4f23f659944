import pytest
from roster_core.errors import LocalValidationError
from roster_core.models import AppConfig
from roster_core.sync_test_helpers import quick_player
from roster_core.validation import (
    DUPLICATE_DNI,
    check_roster_size,
    find_duplicate_dnis,
    validate_edit,
    validate_registration,
)

def test_unique_dnis_have_no_errors():
    roster = [quick_player("A", "B", "1"), quick_player("C", "D", "2"), quick_player("E", "F", "")]
    assert find_duplicate_dnis(roster) == {}

def test_every_occurrence_of_a_duplicate_is_flagged():
    roster = [
        quick_player(dni="123"),
        quick_player(dni="9"),
        quick_player(dni=" 123 "),
        quick_player(dni="123"),
    ]
    errors = find_duplicate_dnis(roster)
    assert set(errors) == {0, 2, 3}
    assert errors[0] == DUPLICATE_DNI

def test_empty_dnis_are_not_duplicates():
    roster = [quick_player(dni=""), quick_player(dni="  "), quick_player(dni="")]
    assert find_duplicate_dnis(roster) == {}

def test_dni_match_is_case_sensitive():
    assert find_duplicate_dnis([quick_player(dni="ab1"), quick_player(dni="AB1")]) == {}

def test_validation_is_idempotent():
    roster = [quick_player(dni="1"), quick_player(dni="1"), quick_player(dni="2")]
    assert find_duplicate_dnis(roster) == find_duplicate_dnis(roster)

def test_roster_size_bounds():
    assert check_roster_size(1, 1, 8) is None
    assert check_roster_size(0, 1, 8)
    assert check_roster_size(9, 1, 8)

def test_registration_requires_team_name():
    with pytest.raises(LocalValidationError, match="Team name"):
        validate_registration("  ", [quick_player("Juan", "Perez", "123")], AppConfig())

def test_registration_requires_player_fields():
    with pytest.raises(LocalValidationError, match="required"):
        validate_registration("Condors", [quick_player("Juan", "", "123")], AppConfig())

def test_registration_rejects_duplicates():
    roster = [quick_player("A", "B", "123"), quick_player("C", "D", "123")]
    with pytest.raises(LocalValidationError, match="duplicate"):
        validate_registration("Condors", roster, AppConfig())

def test_registration_needs_a_player_but_edit_does_not():
    with pytest.raises(LocalValidationError):
        validate_registration("Condors", [], AppConfig())
    validate_edit("Condors", [], AppConfig())

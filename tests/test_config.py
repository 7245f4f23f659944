import pytest
import yaml
from roster_core.config import DEFAULT_CONFIG, ensure_assets_exist, load_config

def test_defaults():
    cfg = load_config(None, env={})
    assert cfg.max_players == 8
    assert cfg.api_base_url == DEFAULT_CONFIG["api_base_url"]
    assert cfg.request_timeout is None

def test_yaml_then_env(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.safe_dump({"api_base_url": "http://localhost:3000/", "max_players": 5}))
    cfg = load_config(str(path), env={"ROSTER_MAX_PLAYERS": "6", "ROSTER_REQUEST_TIMEOUT": "2.5"})
    assert cfg.api_base_url == "http://localhost:3000"
    assert cfg.max_players == 6
    assert cfg.request_timeout == 2.5

def test_unknown_yaml_key_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("colour: red\n")
    with pytest.raises(ValueError):
        load_config(str(path), env={})

def test_bad_values_rejected():
    with pytest.raises(ValueError):
        load_config(None, env={"ROSTER_MAX_PLAYERS": "0"})
    with pytest.raises(ValueError):
        load_config(None, env={"ROSTER_API_BASE_URL": "ftp://x"})

def test_ensure_assets_writes_defaults(tmp_path):
    path = tmp_path / "assets" / "settings.yaml"
    ensure_assets_exist(str(path))
    assert yaml.safe_load(path.read_text())["max_players"] == 8

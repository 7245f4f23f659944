# roster_core/config.py
from __future__ import annotations
import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from .models import AppConfig

SETTINGS_PATH = "assets/settings.yaml"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ===== App defaults =====
DEFAULT_CONFIG: Dict[str, Any] = {
    "api_base_url": "https://deportivo-production-6553.up.railway.app",
    "max_players": 8,
    "min_players": 1,          # registration only; an edited team may drop to 0
    "request_timeout": None,   # transport default
    "log_level": "INFO",
}

# env var -> config key
ENV_OVERRIDES = {
    "ROSTER_API_BASE_URL": "api_base_url",
    "ROSTER_MAX_PLAYERS": "max_players",
    "ROSTER_REQUEST_TIMEOUT": "request_timeout",
    "ROSTER_LOG_LEVEL": "log_level",
}

def ensure_assets_exist(path: str = SETTINGS_PATH) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(DEFAULT_CONFIG, f, sort_keys=False)

def load_settings_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"{path} must contain a mapping of settings.")
    unknown = set(obj) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {sorted(unknown)}")
    return obj

def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Defaults, then the YAML file (if any), then ROSTER_* environment variables."""
    env = os.environ if env is None else env
    values = dict(DEFAULT_CONFIG)
    if path and os.path.exists(path):
        values.update(load_settings_yaml(path))
    for var, key in ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is not None and raw.strip() != "":
            values[key] = raw.strip()
    return AppConfig(**values)

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    # requests' connection pool is noisy at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

def ui_css() -> str:
    return """
<style>
.block-container { padding-top: 1rem; max-width: 960px; }
.card{
  border:1px solid rgba(0,0,0,.08);
  border-radius:14px;
  padding:14px 18px;
  margin-bottom:12px;
}
.code-badge{
  font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
  font-size: 1.6rem; font-weight: 700; letter-spacing: .08em;
}
.small{color:#6b7280;font-size:12px}
</style>
"""

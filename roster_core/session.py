# roster_core/session.py
from __future__ import annotations
import logging
from typing import Optional

from .api import ApiClient
from .editor import RosterEditor
from .models import AppConfig, RegistrationResult, Snapshot
from . import sync

logger = logging.getLogger(__name__)

class RegistrationSession:
    """Registration form state: one editor, reset to a single blank row after success."""

    def __init__(self, client: ApiClient, config: AppConfig):
        self.client = client
        self.config = config
        self.editor = RosterEditor.blank(config)
        self.last_result: Optional[RegistrationResult] = None

    @property
    def success_message(self) -> str:
        r = self.last_result
        if r is None:
            return ""
        return f'Team "{r.name}" and {r.players_registered} player(s) registered successfully!'

    @property
    def recovery_code(self) -> Optional[str]:
        """Code to show after a registration; None when the service did not send one."""
        r = self.last_result
        if r is None or not r.recovery_code:
            return None
        return r.recovery_code

    async def submit(self) -> RegistrationResult:
        # errors propagate and leave the form untouched
        result = await sync.register(self.client, self.editor.team_name, self.editor.players, self.config)
        self.last_result = result
        self.editor.reset()
        return result

class RecoverySession:
    """Snapshot + editable copy for one team looked up by recovery code."""

    def __init__(self, client: ApiClient, config: AppConfig):
        self.client = client
        self.config = config
        self.snapshot: Optional[Snapshot] = None
        self.editor: Optional[RosterEditor] = None

    @property
    def loaded(self) -> bool:
        return self.snapshot is not None

    def _adopt(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.editor = RosterEditor.from_snapshot(snapshot, self.config)

    async def load(self, code: str) -> Snapshot:
        self.snapshot = None
        self.editor = None
        snapshot = await sync.load_team(self.client, code)
        self._adopt(snapshot)
        logger.info("loaded team %s with %d player(s)", snapshot.team_id, len(snapshot.players))
        return snapshot

    async def save(self) -> Snapshot:
        if self.snapshot is None or self.editor is None:
            raise RuntimeError("No team loaded")
        refreshed = await sync.save(
            self.client, self.snapshot, self.editor.team_name, self.editor.players, self.config
        )
        self._adopt(refreshed)
        return refreshed

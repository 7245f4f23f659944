# roster_core/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

PlayerId = Union[int, str]

class Player(BaseModel):
    """One roster row. Wire names are the service's (Spanish) field names."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: Optional[PlayerId] = Field(default=None, alias="id_jugador")
    first_name: str = Field(default="", alias="nombre")
    last_name: str = Field(default="", alias="apellido")
    dni: str = ""

    @field_validator("first_name", "last_name", "dni", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def is_new(self) -> bool:
        return self.id is None

    def editable_fields(self) -> Tuple[str, str, str]:
        return (self.first_name, self.last_name, self.dni)

    def to_payload(self) -> Dict[str, str]:
        return {"nombre": self.first_name, "apellido": self.last_name, "dni": self.dni}

class Team(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: PlayerId = Field(alias="id_equipo")
    name: str = Field(default="", alias="nombre_equipo")
    recovery_code: Optional[str] = Field(default=None, alias="codigo_recuperacion")
    players: List[Player] = Field(default_factory=list, alias="jugadores")

    @field_validator("players", mode="before")
    @classmethod
    def _null_players(cls, v):
        return [] if v is None else v

    @field_validator("recovery_code", mode="before")
    @classmethod
    def _code_as_str(cls, v):
        return None if v is None else str(v)

class Snapshot(BaseModel):
    """Immutable baseline of a team as loaded from the service."""
    model_config = ConfigDict(frozen=True)

    team_id: PlayerId
    name: str
    recovery_code: Optional[str] = None
    players: Tuple[Player, ...] = ()

    @classmethod
    def from_team(cls, team: Team) -> "Snapshot":
        team = team.model_copy(deep=True)
        return cls(
            team_id=team.id,
            name=team.name,
            recovery_code=team.recovery_code,
            players=tuple(team.players),
        )

    def player_by_id(self) -> Dict[PlayerId, Player]:
        return {p.id: p for p in self.players if p.id is not None}

class ChangeSet(BaseModel):
    team_name: Optional[str] = None          # new name, only when it changed
    creates: List[Player] = Field(default_factory=list)
    deletes: List[Player] = Field(default_factory=list)
    updates: List[Player] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.request_count == 0

    @property
    def request_count(self) -> int:
        return (1 if self.team_name is not None else 0) + len(self.creates) + len(self.deletes) + len(self.updates)

class RegistrationResult(BaseModel):
    team_id: PlayerId
    name: str
    recovery_code: Optional[str] = None
    players_registered: int = 0

class AppConfig(BaseModel):
    api_base_url: str = "https://deportivo-production-6553.up.railway.app"
    max_players: int = 8
    min_players: int = 1
    request_timeout: Optional[float] = None
    log_level: str = "INFO"

    @field_validator("api_base_url")
    @classmethod
    def _base_url(cls, v: str) -> str:
        v = (v or "").strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_base_url must be an http(s) URL")
        return v

    @field_validator("max_players")
    @classmethod
    def _positive_cap(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_players must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return str(v).upper()

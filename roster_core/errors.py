# roster_core/errors.py
from __future__ import annotations
from typing import List, Optional, Sequence

class RosterError(Exception):
    """Base for every failure the UI is expected to show to the user."""

    def describe(self) -> str:
        return str(self)

class LocalValidationError(RosterError):
    pass

class RegistrationError(RosterError):
    pass

class RequestFailure(RosterError):
    def __init__(self, status_code: int, reason: Optional[str] = None, method: str = "", url: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} -> {status_code}: {reason or '<no reason>'}".strip())

    def describe(self) -> str:
        return self.reason or f"Error {self.status_code}"

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    def mentions(self, *markers: str) -> bool:
        """True for a conflict whose reason contains any marker (case-insensitive)."""
        if not self.is_conflict or not self.reason:
            return False
        text = self.reason.lower()
        return any(m.lower() in text for m in markers)

class TeamNotFound(RequestFailure):
    def __init__(self, code: str, method: str = "GET", url: str = ""):
        super().__init__(404, f'No team found with code "{code}".', method, url)
        self.code = code

class TransportFailure(RosterError):
    def __init__(self, reason: str, method: str = "", url: str = ""):
        self.reason = reason
        self.method = method
        self.url = url
        super().__init__(f"{method} {url}: {reason}".strip())

    def describe(self) -> str:
        return f"Connection error - {self.reason}"

class AggregateError(RosterError):
    """Several independent request failures reported as one message."""

    def __init__(self, header: str, failures: Sequence[str]):
        self.header = header
        self.failures: List[str] = list(failures)
        super().__init__(self.describe())

    def describe(self) -> str:
        return "\n- ".join([self.header] + self.failures)

"""Outcome of a command permission check."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Allowed:
    pass


@dataclass(frozen=True, slots=True)
class Denied:
    """Denied without a specific reason; the dispatcher sends its generic notice."""


@dataclass(frozen=True, slots=True)
class DeniedWithMessage:
    text: str


PermissionResult = Allowed | Denied | DeniedWithMessage

ALLOWED = Allowed()
DENIED = Denied()

"""Upstream entities reduced to the closed set of shapes the client understands."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Person:
    first_name: str
    last_name: str | None = None
    username: str | None = None


@dataclass(frozen=True, slots=True)
class Group:
    """Basic group, including one the account was removed from."""

    title: str
    forbidden: bool = False


@dataclass(frozen=True, slots=True)
class Channel:
    """Broadcast channel or megagroup."""

    title: str
    broadcast: bool = False
    username: str | None = None


@dataclass(frozen=True, slots=True)
class Unsupported:
    kind: str


Peer = Person | Group | Channel | Unsupported

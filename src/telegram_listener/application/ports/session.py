from __future__ import annotations

from typing import Protocol


class SessionStore(Protocol):
    def load(self) -> str: ...

    def save(self, session: str) -> None: ...

from __future__ import annotations

from typing import Protocol


class CredentialPrompt(Protocol):
    def phone(self) -> str: ...

    def code(self) -> str: ...

    def password(self) -> str: ...

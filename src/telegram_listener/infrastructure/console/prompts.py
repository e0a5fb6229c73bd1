from __future__ import annotations

import getpass


class ConsolePrompt:
    """Asks for login credentials on the terminal."""

    def phone(self) -> str:
        return input("Phone number: ").strip()

    def code(self) -> str:
        return input("Code: ").strip()

    def password(self) -> str:
        return getpass.getpass("Password: ")

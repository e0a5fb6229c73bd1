from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSessionStore:
    """Keeps the session string in a plain UTF-8 file.

    I/O problems are logged and swallowed: a missing or unreadable file means
    a fresh login, a failed write only costs the next login.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str:
        try:
            if self._path.exists():
                return self._path.read_text(encoding="utf-8").strip()
        except OSError:
            logger.warning("Failed to read session from file: %s", self._path, exc_info=True)
        return ""

    def save(self, session: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(session, encoding="utf-8")
            logger.debug("Session saved to %s", self._path)
        except OSError:
            logger.error("Failed to save session to file: %s", self._path, exc_info=True)

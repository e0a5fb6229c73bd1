from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Message:
    id: int
    chat_id: str
    text: str
    date: datetime
    sender_id: str | None = None
    sender_name: str | None = None

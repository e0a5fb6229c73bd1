from __future__ import annotations

from dataclasses import dataclass

from telegram_listener.domain.value_objects.enums import ChatType


@dataclass(frozen=True, slots=True)
class Chat:
    id: str
    title: str
    type: ChatType
    username: str | None = None

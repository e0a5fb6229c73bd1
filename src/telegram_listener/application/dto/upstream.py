"""Raw shapes handed over by the upstream gateway, before normalization."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from telegram_listener.domain.value_objects.peers import Peer

EntityId = int | str


@dataclass(frozen=True, slots=True)
class RawMessage:
    id: int
    chat_id: EntityId | None
    text: str | None
    date: int | float | datetime
    sender_id: EntityId | None = None
    sender: Peer | None = None


@dataclass(frozen=True, slots=True)
class RawDialog:
    id: EntityId | None
    entity: Peer | None

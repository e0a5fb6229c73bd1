from __future__ import annotations

from typing import Any

from telethon.tl import types

from telegram_listener.application.dto.upstream import RawDialog, RawMessage
from telegram_listener.domain.value_objects.peers import (
    Channel,
    Group,
    Peer,
    Person,
    Unsupported,
)


def entity_to_peer(entity: Any) -> Peer | None:
    match entity:
        case None:
            return None
        case types.User():
            return Person(
                first_name=entity.first_name or "",
                last_name=entity.last_name,
                username=entity.username,
            )
        case types.Chat():
            return Group(title=entity.title)
        case types.ChatForbidden():
            return Group(title=entity.title, forbidden=True)
        case types.Channel():
            return Channel(
                title=entity.title,
                broadcast=bool(entity.broadcast),
                username=entity.username,
            )
        case _:
            return Unsupported(kind=type(entity).__name__)


def dialog_to_raw(dialog: Any) -> RawDialog:
    return RawDialog(id=dialog.id, entity=entity_to_peer(dialog.entity))


def message_to_raw(message: Any) -> RawMessage:
    return RawMessage(
        id=message.id,
        chat_id=message.chat_id,
        text=message.text,
        date=message.date,
        sender_id=message.sender_id,
        sender=entity_to_peer(message.sender),
    )

from __future__ import annotations

from typing import Iterable

from telegram_listener.application.dto.upstream import RawDialog
from telegram_listener.domain.entities.chat import Chat
from telegram_listener.domain.value_objects.enums import ChatType
from telegram_listener.domain.value_objects.peers import Channel, Group, Person
from telegram_listener.services.message_normalizer import display_name


def chat_from_dialog(dialog: RawDialog) -> Chat | None:
    """Classify a dialog, or return None when its entity is not a chat we list."""
    chat_id = str(dialog.id) if dialog.id is not None else ""

    match dialog.entity:
        case Person(username=username) as person:
            return Chat(
                id=chat_id,
                title=display_name(person) or "",
                type=ChatType.PRIVATE,
                username=username,
            )
        case Group(title=title):
            return Chat(id=chat_id, title=title, type=ChatType.GROUP)
        case Channel(title=title, broadcast=broadcast, username=username):
            return Chat(
                id=chat_id,
                title=title,
                type=ChatType.CHANNEL if broadcast else ChatType.GROUP,
                username=username,
            )
        case _:
            return None


def build_chats(dialogs: Iterable[RawDialog]) -> list[Chat]:
    """Convert dialogs to chats in upstream order, skipping unrecognized entities."""
    chats: list[Chat] = []
    for dialog in dialogs:
        chat = chat_from_dialog(dialog)
        if chat is not None:
            chats.append(chat)
    return chats

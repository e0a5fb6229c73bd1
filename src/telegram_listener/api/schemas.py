from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from telegram_listener.domain.value_objects.enums import ChatType


class ChatResponse(BaseModel):
    id: str
    title: str
    type: ChatType
    username: str | None

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    id: int
    chat_id: str
    text: str
    date: datetime
    sender_id: str | None
    sender_name: str | None

    model_config = {"from_attributes": True}

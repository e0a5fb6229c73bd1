"""Telethon-backed implementation of the messenger gateway."""
from __future__ import annotations

import logging
from typing import Any

from telethon import TelegramClient as TelethonClient
from telethon import events
from telethon.sessions import StringSession

from telegram_listener.application.dto.upstream import EntityId, RawDialog
from telegram_listener.application.ports.gateway import OnRawMessageCallback
from telegram_listener.application.ports.prompt import CredentialPrompt
from telegram_listener.domain.value_objects.peers import Peer
from telegram_listener.infrastructure.telegram.mappers import (
    dialog_to_raw,
    entity_to_peer,
    message_to_raw,
)

logger = logging.getLogger(__name__)


class TelethonGateway:
    """Implements application.ports.gateway.MessengerGateway."""

    def __init__(self, client: TelethonClient) -> None:
        self._client = client

    @classmethod
    def create(
        cls,
        api_id: int,
        api_hash: str,
        *,
        session: str = "",
        connection_retries: int = 5,
    ) -> TelethonGateway:
        client = TelethonClient(
            StringSession(session),
            api_id,
            api_hash,
            connection_retries=connection_retries,
        )
        return cls(client)

    async def connect(self, prompt: CredentialPrompt) -> None:
        await self._client.start(
            phone=prompt.phone,
            password=prompt.password,
            code_callback=prompt.code,
        )
        logger.info("Telegram session started")

    async def disconnect(self) -> None:
        await self._client.disconnect()
        logger.info("Telegram session disconnected")

    async def run_until_disconnected(self) -> None:
        await self._client.disconnected

    async def list_dialogs(self, limit: int) -> list[RawDialog]:
        dialogs = await self._client.get_dialogs(limit=limit)
        return [dialog_to_raw(dialog) for dialog in dialogs]

    def subscribe_new_messages(self, callback: OnRawMessageCallback) -> None:
        async def _on_new_message(event: Any) -> None:
            callback(message_to_raw(event.message))

        self._client.add_event_handler(_on_new_message, events.NewMessage())

    async def resolve_entity(self, entity_id: EntityId) -> Peer:
        entity = await self._client.get_entity(entity_id)
        peer = entity_to_peer(entity)
        if peer is None:
            raise LookupError(f"Entity {entity_id} not found")
        return peer

    def session_string(self) -> str:
        return self._client.session.save()

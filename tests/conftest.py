"""Shared test fixtures."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from telegram_listener.application.dto.upstream import EntityId, RawDialog, RawMessage
from telegram_listener.application.ports.gateway import OnRawMessageCallback
from telegram_listener.client import TelegramClient
from telegram_listener.domain.value_objects.peers import Peer, Person

EPOCH = 1_700_000_000


def make_raw_message(
    *,
    message_id: int = 1,
    chat_id: EntityId | None = "123",
    text: str | None = "Hello",
    date: int | float | datetime = EPOCH,
    sender_id: EntityId | None = None,
    sender: Peer | None = None,
) -> RawMessage:
    return RawMessage(
        id=message_id,
        chat_id=chat_id,
        text=text,
        date=date,
        sender_id=sender_id,
        sender=sender,
    )


def utc(epoch: int | float) -> datetime:
    return datetime.fromtimestamp(epoch, tz=timezone.utc)


@dataclass
class FakeGateway:
    """In-memory messenger gateway."""

    dialogs: list[RawDialog] = field(default_factory=list)
    entities: dict[EntityId, Peer] = field(default_factory=dict)
    session: str = "mock_session_string"
    connect_calls: int = 0
    disconnect_calls: int = 0
    resolve_calls: list[EntityId] = field(default_factory=list)
    dialog_limits: list[int] = field(default_factory=list)
    callbacks: list[OnRawMessageCallback] = field(default_factory=list)
    prompts: list[Any] = field(default_factory=list)
    disconnected: asyncio.Event = field(default_factory=asyncio.Event)

    async def connect(self, prompt: Any) -> None:
        self.connect_calls += 1
        self.prompts.append(prompt)

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        self.disconnected.set()

    async def run_until_disconnected(self) -> None:
        await self.disconnected.wait()

    async def list_dialogs(self, limit: int) -> list[RawDialog]:
        self.dialog_limits.append(limit)
        return self.dialogs[:limit]

    def subscribe_new_messages(self, callback: OnRawMessageCallback) -> None:
        self.callbacks.append(callback)

    async def resolve_entity(self, entity_id: EntityId) -> Peer:
        self.resolve_calls.append(entity_id)
        try:
            return self.entities[entity_id]
        except KeyError:
            raise LookupError(f"Entity {entity_id} not found") from None

    def session_string(self) -> str:
        return self.session

    def emit(self, raw: RawMessage) -> None:
        for callback in self.callbacks:
            callback(raw)


@dataclass
class FakeSessionStore:
    stored: str = ""
    saved: list[str] = field(default_factory=list)
    load_calls: int = 0

    def load(self) -> str:
        self.load_calls += 1
        return self.stored

    def save(self, session: str) -> None:
        self.saved.append(session)


class FakePrompt:
    def phone(self) -> str:
        return "+10000000000"

    def code(self) -> str:
        return "12345"

    def password(self) -> str:
        return "secret"


@dataclass(eq=False)
class RecordingHandler:
    """Async handler that records every message it receives."""

    received: list[Any] = field(default_factory=list)

    async def __call__(self, message: Any) -> None:
        self.received.append(message)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def client(gateway: FakeGateway, session_store: FakeSessionStore) -> TelegramClient:
    return TelegramClient(gateway, session_store=session_store, prompt=FakePrompt())


@pytest.fixture
def jane() -> Person:
    return Person(first_name="Jane", last_name="Smith")

from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from telegram_listener.application.dto.upstream import EntityId, RawDialog, RawMessage
from telegram_listener.application.ports.prompt import CredentialPrompt
from telegram_listener.domain.value_objects.peers import Peer

OnRawMessageCallback = Callable[[RawMessage], None]
EntityResolver = Callable[[EntityId], Awaitable[Peer]]


class MessengerGateway(Protocol):
    async def connect(self, prompt: CredentialPrompt) -> None: ...

    async def disconnect(self) -> None: ...

    async def run_until_disconnected(self) -> None: ...

    async def list_dialogs(self, limit: int) -> list[RawDialog]: ...

    def subscribe_new_messages(self, callback: OnRawMessageCallback) -> None: ...

    async def resolve_entity(self, entity_id: EntityId) -> Peer: ...

    def session_string(self) -> str: ...

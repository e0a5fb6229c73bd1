"""High-level Telegram client: login, chat catalog and per-chat listeners."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from telegram_listener.application.exceptions import NotConnectedError
from telegram_listener.application.ports.gateway import MessengerGateway
from telegram_listener.application.ports.prompt import CredentialPrompt
from telegram_listener.application.ports.session import SessionStore
from telegram_listener.domain.entities.chat import Chat
from telegram_listener.infrastructure.console.prompts import ConsolePrompt
from telegram_listener.infrastructure.session.file_store import FileSessionStore
from telegram_listener.infrastructure.telegram.gateway import TelethonGateway
from telegram_listener.services.chat_catalog import build_chats
from telegram_listener.services.event_router import EventRouter
from telegram_listener.services.listener_registry import ListenerRegistry, MessageHandler

if TYPE_CHECKING:
    from telegram_listener.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_DIALOGS_LIMIT = 100


def initial_session(session: str, store: SessionStore | None) -> str:
    """An explicit session string wins; otherwise fall back to the stored one."""
    if session or store is None:
        return session
    return store.load()


class TelegramClient:
    def __init__(
        self,
        gateway: MessengerGateway,
        *,
        session_store: SessionStore | None = None,
        prompt: CredentialPrompt | None = None,
        dialogs_limit: int = DEFAULT_DIALOGS_LIMIT,
    ) -> None:
        self._gateway = gateway
        self._session_store = session_store
        self._prompt = prompt or ConsolePrompt()
        self._dialogs_limit = dialogs_limit
        self._registry = ListenerRegistry()
        self._router = EventRouter(self._registry, gateway.resolve_entity)
        self._connected = False

    @classmethod
    def from_settings(cls, settings: Settings) -> TelegramClient:
        store = FileSessionStore(settings.TELEGRAM_SESSION_FILE) if settings.TELEGRAM_SESSION_FILE else None
        gateway = TelethonGateway.create(
            settings.TELEGRAM_API_ID,
            settings.TELEGRAM_API_HASH,
            session=initial_session(settings.TELEGRAM_SESSION, store),
            connection_retries=settings.TELEGRAM_CONNECTION_RETRIES,
        )
        return cls(
            gateway,
            session_store=store,
            dialogs_limit=settings.TELEGRAM_DIALOGS_LIMIT,
        )

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def listeners(self) -> ListenerRegistry:
        return self._registry

    async def connect(self) -> None:
        """Log in and start routing new messages. Calling it again is a no-op."""
        if self._connected:
            return

        await self._gateway.connect(self._prompt)
        self._connected = True
        self._router.attach(self._gateway)

        if self._session_store is not None:
            self._session_store.save(self._gateway.session_string())

    async def disconnect(self) -> None:
        await self._gateway.disconnect()
        self._connected = False
        await self._router.drain()

    async def run_until_disconnected(self) -> None:
        if not self._connected:
            raise NotConnectedError()
        await self._gateway.run_until_disconnected()

    def session_string(self) -> str:
        return self._gateway.session_string()

    async def get_all_chats(self) -> list[Chat]:
        """Return private chats, groups and channels from the dialog list."""
        if not self._connected:
            raise NotConnectedError()

        dialogs = await self._gateway.list_dialogs(self._dialogs_limit)
        chats = build_chats(dialogs)
        logger.debug("Loaded %d chats from %d dialogs", len(chats), len(dialogs))
        return chats

    def add_chat_listener(self, chat_id: str, handler: MessageHandler) -> None:
        self._registry.register(chat_id, handler)

    def remove_chat_listener(self, chat_id: str, handler: MessageHandler | None = None) -> None:
        self._registry.unregister(chat_id, handler)

"""Single upstream subscription fanned out to per-chat handlers."""
from __future__ import annotations

import asyncio
import inspect
import logging

from telegram_listener.application.dto.upstream import RawMessage
from telegram_listener.application.ports.gateway import EntityResolver, MessengerGateway
from telegram_listener.domain.entities.message import Message
from telegram_listener.services.listener_registry import ListenerRegistry, MessageHandler
from telegram_listener.services.message_normalizer import normalize_message

logger = logging.getLogger(__name__)


class EventRouter:
    """Routes inbound messages to the handlers registered for their chat.

    Each inbound message is handled in its own task, so a slow handler never
    holds back the next message. Handlers of one message run concurrently and
    a failing handler is logged without affecting the others.
    """

    def __init__(self, registry: ListenerRegistry, resolve_entity: EntityResolver) -> None:
        self._registry = registry
        self._resolve_entity = resolve_entity
        self._subscribed = False
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def subscribed(self) -> bool:
        return self._subscribed

    def attach(self, gateway: MessengerGateway) -> None:
        if self._subscribed:
            return
        gateway.subscribe_new_messages(self.on_raw_message)
        self._subscribed = True
        logger.info("Global message listener attached")

    def on_raw_message(self, raw: RawMessage) -> None:
        """Gateway callback: schedule dispatch and return immediately."""
        task = asyncio.create_task(self._dispatch_logged(raw), name=f"route-message-{raw.id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for every in-flight dispatch to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def dispatch(self, raw: RawMessage) -> bool:
        """Deliver one message; returns True when at least one handler matched."""
        chat_id = str(raw.chat_id) if raw.chat_id is not None else ""
        if not chat_id:
            return False

        handlers = self._registry.lookup(chat_id)
        if not handlers:
            return False

        message = await normalize_message(raw, chat_id, self._resolve_entity)
        await asyncio.gather(*(self._invoke(handler, message) for handler in handlers))
        return True

    async def _dispatch_logged(self, raw: RawMessage) -> None:
        try:
            await self.dispatch(raw)
        except Exception:
            logger.exception("Error routing message %s", raw.id)

    async def _invoke(self, handler: MessageHandler, message: Message) -> None:
        try:
            result = handler(message)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Error in message handler for chat %s", message.chat_id)

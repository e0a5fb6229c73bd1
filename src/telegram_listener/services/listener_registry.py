"""Per-chat registry of message handlers."""
from __future__ import annotations

import logging
import threading
from typing import Any, Awaitable, Callable

from telegram_listener.domain.entities.message import Message

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Message], Awaitable[Any] | None]

HandlerKey = tuple[int, int | None]


def handler_key(handler: MessageHandler) -> HandlerKey:
    """Identity of a handler; a bound method is identified by its object and function."""
    target = getattr(handler, "__self__", None)
    func = getattr(handler, "__func__", None)
    if target is not None and func is not None:
        return id(target), id(func)
    return id(handler), None


class ListenerRegistry:
    """Maps chat ids to handlers, compared by identity rather than equality.

    A chat id is present only while at least one handler is registered for it.
    Mutations may come from any thread; lookups return an immutable snapshot.
    Registered handlers are kept referenced, so their identity keys stay valid.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, dict[HandlerKey, MessageHandler]] = {}
        self._lock = threading.Lock()

    def register(self, chat_id: str, handler: MessageHandler) -> None:
        with self._lock:
            self._handlers.setdefault(chat_id, {}).setdefault(handler_key(handler), handler)
        logger.debug("Listener added for chat %s", chat_id)

    def unregister(self, chat_id: str, handler: MessageHandler | None = None) -> None:
        """Remove one handler, or every handler of the chat when none is given."""
        with self._lock:
            if handler is None:
                self._handlers.pop(chat_id, None)
                return
            handlers = self._handlers.get(chat_id)
            if handlers:
                handlers.pop(handler_key(handler), None)
                if not handlers:
                    del self._handlers[chat_id]

    def lookup(self, chat_id: str) -> tuple[MessageHandler, ...]:
        with self._lock:
            return tuple(self._handlers.get(chat_id, {}).values())

    def chat_ids(self) -> list[str]:
        with self._lock:
            return list(self._handlers)

    def __contains__(self, chat_id: object) -> bool:
        with self._lock:
            return chat_id in self._handlers

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

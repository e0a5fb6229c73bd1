from __future__ import annotations

import logging
from datetime import datetime, timezone

from telegram_listener.application.dto.upstream import RawMessage
from telegram_listener.application.ports.gateway import EntityResolver
from telegram_listener.domain.entities.message import Message
from telegram_listener.domain.value_objects.peers import (
    Channel,
    Group,
    Peer,
    Person,
    Unsupported,
)

logger = logging.getLogger(__name__)


def display_name(peer: Peer) -> str | None:
    match peer:
        case Person(first_name=first, last_name=last):
            first = first or ""
            return f"{first} {last}" if last else first
        case Group(title=title, forbidden=False) | Channel(title=title):
            return title
        case Group() | Unsupported():
            return None


def to_datetime(value: int | float | datetime) -> datetime:
    """Convert an upstream timestamp (epoch seconds or datetime) to aware UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    millis = round(value * 1000)
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


async def resolve_sender_name(raw: RawMessage, resolve_entity: EntityResolver) -> str | None:
    """Best-effort sender name: embedded entity, then a single lookup, then nothing."""
    if raw.sender is not None:
        return display_name(raw.sender)

    if raw.sender_id is None:
        return None

    try:
        entity = await resolve_entity(raw.sender_id)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Could not fetch sender info for %s: %s", raw.sender_id, exc)
        return None

    name = display_name(entity)
    if name is None:
        logger.debug("Sender %s resolved to an unnamed entity: %s", raw.sender_id, entity)
    return name


async def normalize_message(
    raw: RawMessage,
    chat_id: str,
    resolve_entity: EntityResolver,
) -> Message:
    """Build the canonical message for a routed upstream event.

    Never fails because of sender enrichment; an unresolved sender simply
    leaves ``sender_name`` empty.
    """
    sender_name = await resolve_sender_name(raw, resolve_entity)
    return Message(
        id=raw.id,
        chat_id=chat_id,
        text=raw.text or "",
        date=to_datetime(raw.date),
        sender_id=str(raw.sender_id) if raw.sender_id is not None else None,
        sender_name=sender_name,
    )

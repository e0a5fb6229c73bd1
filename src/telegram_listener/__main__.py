"""Entrypoint: python -m telegram_listener {chats,listen}"""
from __future__ import annotations

import argparse
import asyncio
import logging

from telegram_listener.api.schemas import ChatResponse, MessageResponse
from telegram_listener.client import TelegramClient
from telegram_listener.config import settings
from telegram_listener.domain.entities.message import Message

logger = logging.getLogger(__name__)


def _print_message(message: Message) -> None:
    print(MessageResponse.model_validate(message).model_dump_json())


async def list_chats(client: TelegramClient) -> None:
    for chat in await client.get_all_chats():
        print(ChatResponse.model_validate(chat).model_dump_json())


async def listen(client: TelegramClient, chat_ids: list[str]) -> None:
    for chat_id in chat_ids:
        client.add_chat_listener(chat_id, _print_message)
    logger.info("Listening to %d chat(s), press Ctrl+C to stop", len(chat_ids))
    await client.run_until_disconnected()


async def run(args: argparse.Namespace) -> None:
    client = TelegramClient.from_settings(settings)
    await client.connect()
    try:
        if args.command == "chats":
            await list_chats(client)
        else:
            await listen(client, args.chat_ids)
    finally:
        await client.disconnect()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="telegram_listener")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("chats", help="print every chat as a JSON line")
    listen_parser = sub.add_parser("listen", help="print new messages of the given chats")
    listen_parser.add_argument("chat_ids", nargs="+", metavar="CHAT_ID")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

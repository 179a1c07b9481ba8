#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no LINE).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable session key for the run
- Sends your typed messages through the same HandleEventUseCase the webhook uses
- Prints the LINE JSON the bot would reply with

Movies come from TMDB when TMDB_API_KEY is set, otherwise from the built-in mock list.
"""

from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.ports.message_platform import MessagePlatformPort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_event import HandleEventUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.send_reply import SendReplyUseCase
from app.core.config import settings
from app.domain.entities.message import InboundEvent, OutboundMessage
from app.infrastructure.line.line_platform import to_line_message
from app.infrastructure.store.memory_store import MemorySessionStore
from app.infrastructure.tmdb.mock_catalog import MockMovieCatalog
from app.infrastructure.tmdb.tmdb_catalog import TmdbMovieCatalog


class ConsolePlatform(MessagePlatformPort):
    def reply(self, reply_token: str, messages: Sequence[OutboundMessage]) -> None:
        print(f"\n--- Reply ({reply_token}) ---")
        for message in messages:
            print(json.dumps(to_line_message(message), ensure_ascii=False, indent=2))


def _print_header(session_key: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_key: {session_key}")
    print("Type your message and press Enter.")
    print("Commands: /follow (greeting), /new (new session), /quit, /help")
    print("-" * 60)


def _build_use_case() -> HandleEventUseCase:
    if settings.TMDB_API_KEY:
        catalog = TmdbMovieCatalog(
            api_key=settings.TMDB_API_KEY,
            base_url=settings.TMDB_BASE_URL,
            language=settings.TMDB_LANGUAGE,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
    else:
        catalog = MockMovieCatalog()
    return HandleEventUseCase(
        catalog=catalog,
        store=MemorySessionStore(max_entries=settings.SESSION_MAX_ENTRIES),
        classify_intent=ClassifyIntentUseCase(),
        composer=ReplyComposer(image_base_url=settings.TMDB_IMAGE_BASE_URL),
        send_reply=SendReplyUseCase(platform=ConsolePlatform()),
    )


def main() -> None:
    session_key = "userId:local_user_1"
    use_case = _build_use_case()
    _print_header(session_key)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /follow -> simulate a new follower (greeting)")
            print("  /new    -> start a new session key (forgets the last movie)")
            print("  /quit   -> exit")
            print("Triggers: สุ่มหนัง, สุ่มหนังรัก, สุ่มหนังตลก, สุ่มหนังผี, ขอเรื่องย่อหน่อย")
            continue
        if cmd == "/new":
            session_key = f"userId:local_user_{int(time.time())}"
            print(f"New session_key: {session_key}")
            continue

        reply_token = f"local_{int(time.time() * 1000)}"
        if cmd == "/follow":
            event = InboundEvent(kind="follow", event_type="follow", reply_token=reply_token, session_key=session_key)
        else:
            event = InboundEvent(
                kind="text",
                event_type="message",
                reply_token=reply_token,
                session_key=session_key,
                text=user_text,
                message_type="text",
            )
        use_case.handle(event)


if __name__ == "__main__":
    main()

"""Seed development data: two users, two matches, last messages and a read marker."""
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone

from gamelink.domain.entities.conversation import Conversation
from gamelink.domain.entities.last_message import LastMessage
from gamelink.infrastructure.db.session import AsyncSessionLocal
from gamelink.infrastructure.db.uow import SqlAlchemyUoW
from gamelink.logging_config import configure_logging

logger = logging.getLogger(__name__)

ALICE = uuid.UUID("00000000-0000-4000-8000-00000000a11c")
BOB = uuid.UUID("00000000-0000-4000-8000-000000000b0b")
CAROL = uuid.UUID("00000000-0000-4000-8000-0000000ca201")


async def seed() -> None:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        now = datetime.now(timezone.utc)

        with_bob = await uow.conversations_w.create(
            Conversation(id=uuid.uuid4(), user1_id=ALICE, user2_id=BOB, is_active=True, created_at=now)
        )
        with_carol = await uow.conversations_w.create(
            Conversation(id=uuid.uuid4(), user1_id=CAROL, user2_id=ALICE, is_active=True, created_at=now)
        )

        # Bob wrote after Alice last looked: unread for Alice.
        await uow.read_markers_w.upsert(with_bob.id, ALICE, now - timedelta(minutes=10))
        await uow.last_messages_w.upsert(
            LastMessage(conversation_id=with_bob.id, sender_id=BOB, body="GG! Rematch?", created_at=now)
        )
        # Alice spoke last: never unread for her.
        await uow.last_messages_w.upsert(
            LastMessage(conversation_id=with_carol.id, sender_id=ALICE, body="Trade tonight?", created_at=now)
        )

        await uow.commit()
        logger.info("Seeded matches %s and %s for user %s", with_bob.id, with_carol.id, ALICE)


def main() -> None:
    configure_logging("info")
    asyncio.run(seed())


if __name__ == "__main__":
    main()

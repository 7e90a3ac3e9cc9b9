from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from gamelink.application.dto.principal import Principal
from gamelink.application.policies.unread import compute_unread_count
from gamelink.application.uow import UoWFactory
from gamelink.domain.entities.conversation import Conversation
from gamelink.domain.entities.last_message import LastMessage
from gamelink.domain.entities.read_marker import ReadMarker

logger = logging.getLogger(__name__)


async def _conversations_with_last_messages(
    user_id: UUID,
    uow_factory: UoWFactory,
) -> tuple[list[Conversation], list[LastMessage]]:
    async with uow_factory() as uow:
        conversations = await uow.conversations.list_active_for_user(user_id)
        if not conversations:
            return [], []
        messages = await uow.last_messages.list_for_conversations(
            [c.id for c in conversations],
        )
        return conversations, messages


async def _read_markers(user_id: UUID, uow_factory: UoWFactory) -> list[ReadMarker]:
    async with uow_factory() as uow:
        return await uow.read_markers.list_for_user(user_id)


async def fetch_unread_count(user_id: UUID, uow_factory: UoWFactory) -> int | None:
    """Return the unread conversation count, or None when it cannot be known.

    The read markers are fetched concurrently with the membership and
    last-message lookups, each on its own unit of work. A failure in either
    branch cancels the other before the units of work are released.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            chain = tg.create_task(_conversations_with_last_messages(user_id, uow_factory))
            reads = tg.create_task(_read_markers(user_id, uow_factory))
    except ExceptionGroup:
        logger.exception("Unread count lookup failed for user %s", user_id)
        return None

    conversations, messages = chain.result()
    return compute_unread_count(user_id, conversations, messages, reads.result())


async def get_unread_count(
    principal: Principal | None,
    uow_factory: UoWFactory,
) -> int:
    """Badge value: anonymous callers and unknown results both read as zero."""
    if principal is None:
        return 0
    count = await fetch_unread_count(principal.subject_id, uow_factory)
    return 0 if count is None else count

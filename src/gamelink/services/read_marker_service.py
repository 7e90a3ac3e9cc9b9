from __future__ import annotations

import logging
import uuid

from gamelink.application.dto.principal import Principal
from gamelink.application.exceptions import PersistenceError
from gamelink.application.policies.permissions import assert_conversation_access
from gamelink.application.ports.clock import Clock
from gamelink.application.uow import UnitOfWork

logger = logging.getLogger(__name__)


async def mark_read(
    conversation_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
    clock: Clock,
) -> None:
    """Record that the caller has read the conversation up to now.

    Repeating the call only moves the marker forward to the newer "now".
    """
    conversation = await uow.conversations.get_by_id(conversation_id)
    assert_conversation_access(principal, conversation)

    try:
        await uow.read_markers_w.upsert(
            conversation_id,
            principal.subject_id,
            clock.now(),
        )
        await uow.commit()
    except PersistenceError as exc:
        logger.exception(
            "mark_read failed for conversation %s user %s",
            conversation_id,
            principal.subject_id,
        )
        await uow.rollback()
        raise PersistenceError("Failed to mark chat as read") from exc

from __future__ import annotations

import logging
import uuid

from gamelink.application.dto.principal import Principal
from gamelink.application.exceptions import BadRequestError, PersistenceError
from gamelink.application.policies.permissions import (
    assert_conversation_access,
    assert_conversation_active,
)
from gamelink.application.ports.clock import Clock
from gamelink.application.uow import UnitOfWork
from gamelink.domain.entities.last_message import LastMessage

logger = logging.getLogger(__name__)


async def record_last_message(
    conversation_id: uuid.UUID,
    principal: Principal,
    content: str | None,
    uow: UnitOfWork,
    clock: Clock,
) -> LastMessage:
    """Store ``content`` as the conversation's single last message.

    The previous last message, if any, is replaced.
    """
    body = (content or "").strip()
    if not body:
        raise BadRequestError("Missing content")

    conversation = await uow.conversations.get_by_id(conversation_id)
    conversation = assert_conversation_access(principal, conversation)
    assert_conversation_active(conversation)

    message = LastMessage(
        conversation_id=conversation_id,
        sender_id=principal.subject_id,
        body=body,
        created_at=clock.now(),
    )
    try:
        message = await uow.last_messages_w.upsert(message)
        await uow.commit()
    except PersistenceError as exc:
        logger.exception("Saving last message failed for conversation %s", conversation_id)
        await uow.rollback()
        raise PersistenceError("Failed to save last message") from exc
    return message

from __future__ import annotations

import logging
from typing import Any

from gamelink.domain.entities.last_message import LastMessage
from gamelink.domain.value_objects.instant import parse_instant
from gamelink.infrastructure.db.models.chat_message import ChatMessageModel

logger = logging.getLogger(__name__)


def model_to_entity(model: ChatMessageModel) -> LastMessage:
    created_at = parse_instant(model.created_at)
    if created_at is None:
        logger.warning("Unparseable created_at on last message of match %s", model.match_id)
    return LastMessage(
        conversation_id=model.match_id,
        sender_id=model.sender_id,
        body=model.content,
        created_at=created_at,
    )


def entity_to_values(entity: LastMessage) -> dict[str, Any]:
    return {
        "match_id": entity.conversation_id,
        "sender_id": entity.sender_id,
        "content": entity.body,
        "created_at": entity.created_at,
    }

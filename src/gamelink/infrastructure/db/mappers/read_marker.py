from __future__ import annotations

import logging

from gamelink.domain.entities.read_marker import ReadMarker
from gamelink.domain.value_objects.instant import parse_instant
from gamelink.infrastructure.db.models.chat_read import ChatReadModel

logger = logging.getLogger(__name__)


def model_to_entity(model: ChatReadModel) -> ReadMarker:
    last_read_at = parse_instant(model.last_read_at)
    if last_read_at is None:
        logger.warning(
            "Unparseable last_read_at for match %s user %s", model.match_id, model.user_id,
        )
    return ReadMarker(
        conversation_id=model.match_id,
        user_id=model.user_id,
        last_read_at=last_read_at,
    )

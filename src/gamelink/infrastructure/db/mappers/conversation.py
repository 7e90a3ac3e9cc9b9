from __future__ import annotations

from gamelink.domain.entities.conversation import Conversation
from gamelink.infrastructure.db.models.match import MatchModel


def model_to_entity(model: MatchModel) -> Conversation:
    return Conversation(
        id=model.id,
        user1_id=model.user1_id,
        user2_id=model.user2_id,
        is_active=model.is_active,
        created_at=model.created_at,
    )


def entity_to_model(entity: Conversation) -> MatchModel:
    return MatchModel(
        id=entity.id,
        user1_id=entity.user1_id,
        user2_id=entity.user2_id,
        is_active=entity.is_active,
        created_at=entity.created_at,
    )

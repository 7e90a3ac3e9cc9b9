from __future__ import annotations

from gamelink.domain.entities.poll import Poll
from gamelink.domain.value_objects.enums import PollStatus
from gamelink.domain.value_objects.instant import parse_instant
from gamelink.infrastructure.db.models.poll import PollModel


def model_to_entity(model: PollModel) -> Poll:
    return Poll(
        id=model.id,
        slug=model.slug,
        title=model.title,
        description=model.description,
        status=PollStatus(model.status),
        starts_at=parse_instant(model.starts_at),
        ends_at=parse_instant(model.ends_at),
        created_at=model.created_at,
    )

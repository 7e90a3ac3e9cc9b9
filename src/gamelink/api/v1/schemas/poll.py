from __future__ import annotations

from datetime import datetime
from uuid import UUID

from gamelink.api.v1.schemas.common import ApiModel
from gamelink.application.dto.poll import PollView


class PollResponse(ApiModel):
    id: UUID
    slug: str
    title: str
    description: str | None
    status: str
    starts_at: datetime | None
    ends_at: datetime | None
    created_at: datetime
    is_active: bool

    @classmethod
    def from_view(cls, view: PollView) -> PollResponse:
        p = view.poll
        return cls(
            id=p.id,
            slug=p.slug,
            title=p.title,
            description=p.description,
            status=p.status,
            starts_at=p.starts_at,
            ends_at=p.ends_at,
            created_at=p.created_at,
            is_active=view.is_active,
        )

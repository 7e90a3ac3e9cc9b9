from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from gamelink.domain.value_objects.enums import PollStatus


@dataclass(frozen=True, slots=True)
class Poll:
    id: UUID
    slug: str
    title: str
    description: str | None
    status: PollStatus
    starts_at: datetime | None
    ends_at: datetime | None
    created_at: datetime

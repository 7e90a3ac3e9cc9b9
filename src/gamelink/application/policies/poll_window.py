from __future__ import annotations

from datetime import datetime

from gamelink.domain.entities.poll import Poll
from gamelink.domain.value_objects.enums import PollStatus


def is_poll_active(poll: Poll, now: datetime) -> bool:
    """A published poll is active from starts_at (inclusive) to ends_at (exclusive)."""
    if poll.status != PollStatus.PUBLISHED:
        return False
    starts_ok = poll.starts_at is None or poll.starts_at <= now
    ends_ok = poll.ends_at is None or poll.ends_at > now
    return starts_ok and ends_ok

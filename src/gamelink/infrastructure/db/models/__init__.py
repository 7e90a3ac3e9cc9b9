"""Import all models so Alembic can discover them via Base.metadata."""
from gamelink.infrastructure.db.models.chat_message import ChatMessageModel
from gamelink.infrastructure.db.models.chat_read import ChatReadModel
from gamelink.infrastructure.db.models.match import MatchModel
from gamelink.infrastructure.db.models.poll import PollModel

__all__ = [
    "ChatMessageModel",
    "ChatReadModel",
    "MatchModel",
    "PollModel",
]

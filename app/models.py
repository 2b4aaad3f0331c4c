from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean
from datetime import datetime, timezone
from .database import Base


def utcnow():
    """Current UTC time as a naive datetime, the way every backend stores it."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False)
    total_matches = Column(Integer, nullable=False, default=0)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    rating = Column(Integer, nullable=False, default=1000, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    last_active_at = Column(DateTime, nullable=True)

    @property
    def win_rate(self) -> float:
        # Derived on read, never stored
        if self.total_matches and self.total_matches > 0:
            return (self.wins or 0) / self.total_matches * 100
        return 0.0


class MatchHistory(Base):
    __tablename__ = "match_histories"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(
        Integer,
        ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    game = Column(String(100), nullable=False)
    match_date = Column(DateTime, nullable=False)
    is_win = Column(Boolean, nullable=False, default=False)
    score = Column(Integer, nullable=False, default=0)
    rank = Column(String(50), nullable=True)  # e.g. "Gold", "MVP"

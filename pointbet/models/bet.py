from sqlalchemy import Column, DateTime, Float, ForeignKey, String

from pointbet.core.database import Base
from pointbet.models.columns import enum_column, id_column, timestamp_column, utcnow
from pointbet.models.enums import BetStatus, Team


class Bet(Base):
    __tablename__ = "bets"

    id = id_column()
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    event_id = Column(String(36), ForeignKey("events.id"), nullable=False, index=True)

    team = enum_column(Team, "bet_team", nullable=False)
    amount = Column(Float, nullable=False)
    odds_at_placement = Column(Float, nullable=False)
    potential_payout = Column(Float, nullable=False)
    status = enum_column(BetStatus, "bet_status", default=BetStatus.PENDING, nullable=False)
    settled_at = Column(DateTime(timezone=True), nullable=True)

    created_at = timestamp_column()
    updated_at = timestamp_column(onupdate=utcnow)

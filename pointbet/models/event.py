from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text

from pointbet.core.database import Base
from pointbet.models.columns import enum_column, id_column, timestamp_column, utcnow
from pointbet.models.enums import EventStatus, EventWinner


class Event(Base):
    __tablename__ = "events"

    id = id_column()
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    image_url = Column(String, nullable=True)

    team_a = Column(String, nullable=False)
    team_b = Column(String, nullable=False)
    team_a_score = Column(Integer, nullable=True)
    team_b_score = Column(Integer, nullable=True)

    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    status = enum_column(EventStatus, "event_status", default=EventStatus.UPCOMING, nullable=False)

    initial_odds_a = Column(Float, nullable=False)
    initial_odds_b = Column(Float, nullable=False)
    current_odds_a = Column(Float, nullable=False)
    current_odds_b = Column(Float, nullable=False)
    total_bets_a = Column(Float, default=0.0, nullable=False)
    total_bets_b = Column(Float, default=0.0, nullable=False)
    winner = enum_column(EventWinner, "team_type", nullable=True)

    created_at = timestamp_column()
    updated_at = timestamp_column(onupdate=utcnow)

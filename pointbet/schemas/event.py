from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from pointbet.models.enums import EventStatus, EventWinner


class EventCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    team_a: str = Field(min_length=1)
    team_b: str = Field(min_length=1)
    start_time: datetime
    end_time: datetime
    is_featured: bool = False
    initial_odds_a: float = Field(gt=1)
    initial_odds_b: float = Field(gt=1)

    @model_validator(mode="after")
    def check_schedule(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class EventSettle(BaseModel):
    winner: EventWinner
    team_a_score: Optional[int] = Field(default=None, ge=0)
    team_b_score: Optional[int] = Field(default=None, ge=0)


class EventResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    team_a: str
    team_b: str
    team_a_score: Optional[int] = None
    team_b_score: Optional[int] = None
    start_time: datetime
    end_time: datetime
    is_featured: bool = False
    status: EventStatus
    initial_odds_a: float
    initial_odds_b: float
    current_odds_a: float
    current_odds_b: float
    total_bets_a: float = 0
    total_bets_b: float = 0
    winner: Optional[EventWinner] = None

    class Config:
        from_attributes = True

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pointbet.models.enums import BetStatus, Team


class BetCreate(BaseModel):
    event_id: str
    team: Team
    amount: float = Field(gt=0)


class BetResponse(BaseModel):
    id: str
    event_id: str
    team: Team
    amount: float
    odds_at_placement: float
    potential_payout: float
    status: BetStatus
    settled_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

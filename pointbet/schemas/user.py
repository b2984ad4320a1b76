from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TransactionResponse(BaseModel):
    id: str
    amount: float
    type: str
    reference_id: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class LeaderboardEntry(BaseModel):
    id: str
    username: str
    points_balance: float
    profile_image_url: Optional[str] = None
    total_bets: int = 0
    total_wins: int = 0
    total_losses: int = 0
    win_percentage: float = 0.0
    total_points_won: float = 0.0
    betting_skill: float = 0.0

    class Config:
        from_attributes = True

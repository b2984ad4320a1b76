from fastapi import APIRouter, Depends, status

from pointbet.core.supabase import get_supabase
from pointbet.routes.dependencies import get_current_user
from pointbet.schemas.bet import BetCreate, BetResponse
from pointbet.services import bet_service

router = APIRouter(prefix="/bets", tags=["Bets"])


@router.post("", response_model=BetResponse, status_code=status.HTTP_201_CREATED)
def create_bet(data: BetCreate, user=Depends(get_current_user), db=Depends(get_supabase)):
    return bet_service.place_bet(db, user, data)


@router.get("/user", response_model=list[BetResponse])
def user_bets(user=Depends(get_current_user), db=Depends(get_supabase)):
    return bet_service.list_user_bets(db, user)

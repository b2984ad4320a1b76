from fastapi import APIRouter, Depends, Query

from pointbet.core.supabase import get_supabase
from pointbet.routes.dependencies import get_current_user
from pointbet.schemas.auth import ProfileUpdateRequest
from pointbet.schemas.user import LeaderboardEntry, TransactionResponse
from pointbet.services import auth_service, user_service, wallet_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/profile")
def get_profile(user=Depends(get_current_user), db=Depends(get_supabase)):
    return auth_service.get_profile(db, user)


@router.put("/profile")
def update_profile(
    data: ProfileUpdateRequest,
    user=Depends(get_current_user),
    db=Depends(get_supabase),
):
    return auth_service.update_profile(db, user, data.username, data.profile_image_url)


@router.get("/transactions", response_model=list[TransactionResponse])
def transactions(
    limit: int = Query(default=100, ge=1, le=500),
    user=Depends(get_current_user),
    db=Depends(get_supabase),
):
    return wallet_service.list_transactions(db, user, limit=limit)


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
def leaderboard(
    limit: int = Query(default=50, ge=1, le=100),
    _=Depends(get_current_user),
    db=Depends(get_supabase),
):
    return user_service.get_leaderboard(db, limit=limit)

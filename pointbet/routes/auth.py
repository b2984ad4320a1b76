from fastapi import APIRouter, Depends, status

from pointbet.core.supabase import get_supabase
from pointbet.routes.dependencies import get_current_user
from pointbet.schemas.auth import LoginRequest, ProfileUpdateRequest, RegisterRequest
from pointbet.services import auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db=Depends(get_supabase)):
    return auth_service.register(db, data.email, data.username, data.password)


@router.post("/login")
def login(data: LoginRequest, db=Depends(get_supabase)):
    return auth_service.login(db, data.login_identifier, data.password)


@router.post("/logout")
def logout():
    return auth_service.logout()


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

from typing import Optional

from fastapi import Depends, Header
from supabase import AuthError

from pointbet.core.config import settings
from pointbet.core.errors import AuthenticationError, PermissionDeniedError
from pointbet.core.logging import get_logger
from pointbet.core.security import (
    decode_access_token,
    parse_bearer_token,
    user_from_claims,
    user_from_remote,
)
from pointbet.core.supabase import get_supabase

logger = get_logger(__name__)


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    db=Depends(get_supabase),
):
    token = parse_bearer_token(authorization)

    if settings.SUPABASE_JWT_SECRET:
        return user_from_claims(decode_access_token(token))

    try:
        response = db.auth.get_user(token)
    except AuthError as e:
        logger.warning("token_rejected", error=e.message)
        raise AuthenticationError("Invalid token")

    if response is None or not response.user:
        raise AuthenticationError("Invalid token")
    return user_from_remote(response.user)


def admin_only(user=Depends(get_current_user)):
    if not user.is_admin:
        raise PermissionDeniedError("Admin privileges required")
    return user

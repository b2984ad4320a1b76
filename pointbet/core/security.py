from dataclasses import dataclass

from jose import JWTError, jwt

from pointbet.core.config import settings
from pointbet.core.errors import AuthenticationError

ALGORITHM = "HS256"


@dataclass
class AuthUser:
    id: str
    email: str
    role: str = "user"

    @property
    def is_admin(self):
        return self.role == "admin"


def parse_bearer_token(authorization):
    if not authorization:
        raise AuthenticationError("No token provided")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise AuthenticationError("Invalid token format")

    token = parts[1]
    if not token:
        raise AuthenticationError("No token provided")
    return token


def decode_access_token(token, secret=None):
    try:
        return jwt.decode(
            token,
            secret or settings.SUPABASE_JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError:
        raise AuthenticationError("Invalid token")


def user_from_claims(claims):
    if not claims.get("sub"):
        raise AuthenticationError("Invalid token")
    app_metadata = claims.get("app_metadata") or {}
    return AuthUser(
        id=claims["sub"],
        email=claims.get("email") or "",
        role=app_metadata.get("role") or "user",
    )


def user_from_remote(user):
    app_metadata = getattr(user, "app_metadata", None) or {}
    return AuthUser(
        id=user.id,
        email=user.email or "",
        role=app_metadata.get("role") or "user",
    )

from datetime import datetime, timezone

from postgrest.exceptions import APIError

from pointbet.core.errors import NotFoundError, ServiceError, ValidationError
from pointbet.core.logging import get_logger
from pointbet.core.supabase import first_row

logger = get_logger(__name__)

BALANCE_RETRIES = 3

PROFILE_FIELDS = (
    "id",
    "email",
    "username",
    "points_balance",
    "profile_image_url",
    "last_login_at",
    "is_active",
    "created_at",
    "updated_at",
)


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def public_user(row, fields=PROFILE_FIELDS):
    return {field: row.get(field) for field in fields}


def create_user(db, auth_id, email, username, points_balance=0, is_active=True):
    try:
        result = db.rpc("insert_user", {
            "p_auth_id": auth_id,
            "p_email": email,
            "p_username": username,
            "p_points_balance": points_balance,
            "p_is_active": is_active,
        }).execute()
    except APIError as e:
        raise ServiceError(f"Failed to create user: {e.message}")

    user = first_row(result.data)
    if not user:
        raise ServiceError("Failed to create user: no row returned")
    return user


def _get_user_by(db, column, value):
    try:
        result = db.table("users").select("*").eq(column, value).limit(1).execute()
    except APIError as e:
        raise ServiceError(f"Failed to get user by {column}: {e.message}")
    return first_row(result.data)


def get_user_by_id(db, user_id):
    return _get_user_by(db, "id", user_id)


def get_user_by_auth_id(db, auth_id):
    return _get_user_by(db, "auth_id", auth_id)


def get_user_by_email(db, email):
    return _get_user_by(db, "email", email)


def get_user_by_username(db, username):
    return _get_user_by(db, "username", username)


def username_taken(db, username, exclude_auth_id=None):
    query = db.table("users").select("username").eq("username", username)
    if exclude_auth_id:
        query = query.neq("auth_id", exclude_auth_id)
    try:
        result = query.limit(1).execute()
    except APIError as e:
        logger.error("username_check_failed", error=e.message)
        raise ServiceError("Failed to check username availability")
    return bool(result.data)


def update_user(db, auth_id, changes):
    changes = dict(changes, updated_at=now_iso())
    try:
        result = db.table("users").update(changes).eq("auth_id", auth_id).execute()
    except APIError as e:
        raise ServiceError(f"Failed to update user: {e.message}")

    user = first_row(result.data)
    if not user:
        raise NotFoundError("User not found after update")
    return user


def adjust_balance(db, auth_id, delta, retries=BALANCE_RETRIES):
    """Add ``delta`` to a user's points balance.

    The write only lands if the balance still holds the value it was read
    with; otherwise the row is re-read and the change retried. Raises
    ``ValidationError`` when the balance would go negative.
    """
    for _ in range(retries):
        user = get_user_by_auth_id(db, auth_id)
        if not user:
            raise NotFoundError("User not found")

        balance = user["points_balance"]
        if balance + delta < 0:
            raise ValidationError("Insufficient points balance")

        try:
            result = (
                db.table("users")
                .update({"points_balance": balance + delta, "updated_at": now_iso()})
                .eq("auth_id", auth_id)
                .eq("points_balance", balance)
                .execute()
            )
        except APIError as e:
            raise ServiceError(f"Failed to update balance: {e.message}")

        updated = first_row(result.data)
        if updated:
            return updated
        logger.warning("balance_changed_during_update", auth_id=auth_id, delta=delta)

    raise ServiceError("Failed to update balance")


def get_leaderboard(db, limit=50):
    try:
        result = (
            db.table("user_leaderboard")
            .select("*")
            .order("points_balance", desc=True)
            .limit(limit)
            .execute()
        )
    except APIError as e:
        logger.error("leaderboard_fetch_failed", error=e.message)
        raise ServiceError("Failed to fetch leaderboard")
    return result.data or []

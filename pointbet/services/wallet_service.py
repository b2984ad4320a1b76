from postgrest.exceptions import APIError

from pointbet.core.errors import ServiceError
from pointbet.core.logging import get_logger
from pointbet.core.supabase import first_row
from pointbet.services import user_service

logger = get_logger(__name__)


def record_transaction(db, user_id, amount, transaction_type, reference_id=None, description=None):
    try:
        result = db.table("transactions").insert({
            "user_id": user_id,
            "amount": amount,
            "type": transaction_type.value,
            "reference_id": reference_id,
            "description": description,
        }).execute()
    except APIError as e:
        logger.error("transaction_insert_failed", user_id=user_id, error=e.message)
        raise ServiceError("Failed to record transaction")
    return first_row(result.data)


def list_transactions(db, auth_user, limit=100):
    user = user_service.get_user_by_auth_id(db, auth_user.id)
    if not user:
        raise ServiceError("Failed to fetch user data")
    try:
        result = (
            db.table("transactions")
            .select("*")
            .eq("user_id", user["id"])
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
    except APIError as e:
        logger.error("transactions_fetch_failed", user_id=user["id"], error=e.message)
        raise ServiceError("Failed to fetch transactions")
    return result.data or []

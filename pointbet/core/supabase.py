from typing import Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from pointbet.core.config import settings
from pointbet.core.logging import get_logger

logger = get_logger(__name__)

_client = None


def get_client() -> Client:
    """Return the process-wide service-role client, creating it on first use."""
    global _client
    if _client is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
            raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_KEY environment variables must be set")
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
    return _client


def get_supabase() -> Client:
    return get_client()


def get_optional_supabase() -> Optional[Client]:
    """Like ``get_supabase`` but yields ``None`` when the client is not configured."""
    try:
        return get_client()
    except RuntimeError as e:
        logger.error("supabase_not_configured", error=str(e))
        return None


def check_connection(client) -> bool:
    if client is None:
        return False
    try:
        client.table("users").select("id", count="exact").limit(1).execute()
    except APIError as e:
        logger.error("supabase_connection_failed", error=e.message)
        return False
    except httpx.HTTPError as e:
        logger.error("supabase_unreachable", error=str(e))
        return False
    logger.info("supabase_connection_ok")
    return True


def first_row(data):
    """RPC and PostgREST calls return either a row or a list of rows."""
    if isinstance(data, list):
        return data[0] if data else None
    return data

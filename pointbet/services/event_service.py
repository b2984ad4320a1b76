from postgrest.exceptions import APIError

from pointbet.core.errors import NotFoundError, ServiceError, ValidationError
from pointbet.core.logging import get_logger
from pointbet.core.supabase import first_row
from pointbet.models.enums import EventStatus
from pointbet.services.user_service import now_iso

logger = get_logger(__name__)

CLOSED_EVENT_STATUSES = (EventStatus.COMPLETED.value, EventStatus.CANCELED.value)


def list_events(db, status=None, featured=None):
    query = db.table("events").select("*")
    if status:
        query = query.eq("status", status)
    if featured is not None:
        query = query.eq("is_featured", featured)
    try:
        result = query.order("start_time").execute()
    except APIError as e:
        logger.error("events_fetch_failed", error=e.message)
        raise ServiceError("Failed to fetch events")
    return result.data or []


def get_event(db, event_id):
    try:
        result = db.table("events").select("*").eq("id", event_id).limit(1).execute()
    except APIError as e:
        logger.error("event_fetch_failed", event_id=event_id, error=e.message)
        raise ServiceError("Failed to fetch event")

    event = first_row(result.data)
    if not event:
        raise NotFoundError("Event not found")
    return event


def create_event(db, data):
    row = data.model_dump(mode="json")
    row.update(
        status=EventStatus.UPCOMING.value,
        current_odds_a=data.initial_odds_a,
        current_odds_b=data.initial_odds_b,
        total_bets_a=0,
        total_bets_b=0,
    )
    try:
        result = db.table("events").insert(row).execute()
    except APIError as e:
        logger.error("event_create_failed", error=e.message)
        raise ServiceError("Failed to create event")

    event = first_row(result.data)
    logger.info("event_created", event_id=event["id"], title=event["title"])
    return event


def _restore_event(db, event, changes):
    # Put back the pre-settlement values so the settlement can be retried
    previous = {key: event.get(key) for key in changes}
    try:
        db.table("events").update(previous).eq("id", event["id"]).execute()
    except APIError as e:
        logger.error("event_restore_failed", event_id=event["id"], error=e.message)


def settle_event(db, event_id, data):
    """Close an event and hand bet payouts to the ``settle_bets`` procedure."""
    event = get_event(db, event_id)
    if event["status"] in CLOSED_EVENT_STATUSES:
        raise ValidationError(f"Event is already {event['status']}")

    changes = {
        "status": EventStatus.COMPLETED.value,
        "winner": data.winner.value,
        "updated_at": now_iso(),
    }
    if data.team_a_score is not None:
        changes["team_a_score"] = data.team_a_score
    if data.team_b_score is not None:
        changes["team_b_score"] = data.team_b_score

    try:
        result = db.table("events").update(changes).eq("id", event_id).execute()
    except APIError as e:
        logger.error("event_settle_failed", event_id=event_id, error=e.message)
        raise ServiceError("Failed to settle event")

    try:
        db.rpc("settle_bets", {"event_id": event_id, "winner": data.winner.value}).execute()
    except APIError as e:
        logger.error("bet_settlement_failed", event_id=event_id, error=e.message)
        _restore_event(db, event, changes)
        raise ServiceError("Failed to settle event")

    try:
        db.rpc("refresh_leaderboard", {}).execute()
    except APIError as e:
        logger.warning("leaderboard_refresh_failed", error=e.message)

    logger.info("event_settled", event_id=event_id, winner=data.winner.value)
    return first_row(result.data) or dict(event, **changes)

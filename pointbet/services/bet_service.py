from postgrest.exceptions import APIError

from pointbet.core.errors import AppError, ServiceError, ValidationError
from pointbet.core.logging import get_logger
from pointbet.core.supabase import first_row
from pointbet.models.enums import OPEN_EVENT_STATUSES, BetStatus, TransactionType
from pointbet.services import event_service, user_service, wallet_service

logger = get_logger(__name__)


def _refund(db, auth_id, amount):
    try:
        user_service.adjust_balance(db, auth_id, amount)
    except AppError as e:
        logger.error("balance_refund_failed", auth_id=auth_id, amount=amount, error=e.message)


def place_bet(db, auth_user, data):
    event = event_service.get_event(db, data.event_id)
    if event["status"] not in OPEN_EVENT_STATUSES:
        raise ValidationError("Event is not open for betting")

    user = user_service.get_user_by_auth_id(db, auth_user.id)
    if not user:
        raise ServiceError("Failed to fetch user data")

    team = data.team.value
    odds = event[f"current_odds_{team}"]
    potential_payout = round(data.amount * odds, 2)

    user_service.adjust_balance(db, auth_user.id, -data.amount)

    try:
        result = db.table("bets").insert({
            "user_id": user["id"],
            "event_id": event["id"],
            "team": team,
            "amount": data.amount,
            "odds_at_placement": odds,
            "potential_payout": potential_payout,
            "status": BetStatus.PENDING.value,
        }).execute()
    except APIError as e:
        logger.error("bet_insert_failed", user_id=user["id"], error=e.message)
        _refund(db, auth_user.id, data.amount)
        raise ServiceError("Failed to place bet")

    bet = first_row(result.data)

    try:
        wallet_service.record_transaction(
            db,
            user_id=user["id"],
            amount=-data.amount,
            transaction_type=TransactionType.BET_PLACED,
            reference_id=bet["id"],
            description=f"Bet on {event[f'team_{team}']} in {event['title']}",
        )
    except ServiceError as e:
        logger.warning("bet_ledger_write_failed", bet_id=bet["id"], error=e.message)

    try:
        db.rpc("calculate_odds", {"event_id": event["id"]}).execute()
    except APIError as e:
        logger.warning("odds_recalculation_failed", event_id=event["id"], error=e.message)

    logger.info(
        "bet_placed",
        bet_id=bet["id"],
        event_id=event["id"],
        team=team,
        amount=data.amount,
        odds=odds,
    )
    return bet


def list_user_bets(db, auth_user):
    user = user_service.get_user_by_auth_id(db, auth_user.id)
    if not user:
        raise ServiceError("Failed to fetch user data")
    try:
        result = (
            db.table("bets")
            .select("*")
            .eq("user_id", user["id"])
            .order("created_at", desc=True)
            .execute()
        )
    except APIError as e:
        logger.error("bets_fetch_failed", user_id=user["id"], error=e.message)
        raise ServiceError("Failed to fetch bets")
    return result.data or []

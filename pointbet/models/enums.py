import enum


class EventStatus(str, enum.Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"
    CANCELED = "canceled"


class Team(str, enum.Enum):
    A = "a"
    B = "b"


class EventWinner(str, enum.Enum):
    A = "a"
    B = "b"
    DRAW = "draw"


class BetStatus(str, enum.Enum):
    PENDING = "pending"
    WON = "won"
    LOST = "lost"
    VOIDED = "voided"


class TransactionType(str, enum.Enum):
    BET_PLACED = "bet_placed"
    BET_WON = "bet_won"
    BET_LOST = "bet_lost"
    BET_VOIDED = "bet_voided"
    BONUS = "bonus"
    ADJUSTMENT = "adjustment"


OPEN_EVENT_STATUSES = (EventStatus.UPCOMING.value, EventStatus.LIVE.value)

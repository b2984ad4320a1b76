from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from pointbet.core.config import settings
from pointbet.core.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True) if settings.DATABASE_URL else None


def _load_models():
    from pointbet.models import bet, event, transaction, user, user_role  # noqa: F401


def init_database(bind=None):
    """Create any mirrored table missing from the hosted database.

    Returns False when no direct database connection is configured.
    """
    bind = bind if bind is not None else engine
    if bind is None:
        logger.info("database_bootstrap_skipped", reason="DATABASE_URL not set")
        return False

    _load_models()
    logger.info("database_bootstrap_started")
    Base.metadata.create_all(bind=bind)
    logger.info("database_bootstrap_completed", tables=sorted(Base.metadata.tables))
    return True


def ping_database(bind=None):
    bind = bind if bind is not None else engine
    if bind is None:
        return None
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("database_ping_failed", error=str(e))
        return False
    return True

from sqlalchemy import Boolean, Column, DateTime, Float, String

from pointbet.core.database import Base
from pointbet.models.columns import id_column, timestamp_column, utcnow


class User(Base):
    __tablename__ = "users"

    id = id_column()
    auth_id = Column(String(36), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False)
    username = Column(String(30), unique=True, nullable=False)
    points_balance = Column(Float, default=0.0, nullable=False)
    profile_image_url = Column(String, nullable=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = timestamp_column()
    updated_at = timestamp_column(onupdate=utcnow)

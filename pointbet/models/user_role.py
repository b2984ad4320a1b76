from sqlalchemy import Column, ForeignKey, String

from pointbet.core.database import Base
from pointbet.models.columns import id_column, timestamp_column


class UserRole(Base):
    __tablename__ = "user_roles"

    id = id_column()
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String, nullable=False)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    created_at = timestamp_column()

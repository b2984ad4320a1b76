from sqlalchemy import Column, Float, ForeignKey, String

from pointbet.core.database import Base
from pointbet.models.columns import enum_column, id_column, timestamp_column
from pointbet.models.enums import TransactionType


class Transaction(Base):
    __tablename__ = "transactions"

    id = id_column()
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    type = enum_column(TransactionType, "transaction_type", nullable=False)
    reference_id = Column(String(36), nullable=True)
    description = Column(String, nullable=True)

    created_at = timestamp_column()

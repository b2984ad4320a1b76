import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String


def new_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


def id_column():
    return Column(String(36), primary_key=True, default=new_id)


def timestamp_column(**kwargs):
    return Column(DateTime(timezone=True), default=utcnow, nullable=False, **kwargs)


def enum_column(enum_cls, name, **kwargs):
    return Column(
        Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e]),
        **kwargs,
    )

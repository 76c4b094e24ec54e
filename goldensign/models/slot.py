# goldensign/models/slot.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from goldensign.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class StorageSlot(Base):
    __tablename__ = "storage_slots"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)  # coleção inteira serializada em JSON
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

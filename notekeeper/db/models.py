from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from notekeeper.core.db import Base


class KeyValueEntry(Base):
    __tablename__ = "key_value_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

"""SQLAlchemy ORM models for IntervalTimer."""

from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Preference(Base):
    """One stored key/value pair.  Values are kept as text."""

    __tablename__ = "preferences"

    key = Column(String(64), primary_key=True)
    value = Column(String(255), nullable=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    def __repr__(self) -> str:
        return f"<Preference key={self.key} value={self.value!r}>"

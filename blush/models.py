# blush/models.py

from typing import Optional, List
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    __table_args__ = (
        UniqueConstraint("parlour", "date", "time", name="uq_parlour_date_time"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str
    email: str
    services: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    parlour: str
    date: str = Field(index=True)  # YYYY-MM-DD
    time: str  # HH:MM, 24-hour
    created_at: datetime = Field(default_factory=utcnow)

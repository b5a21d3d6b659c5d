import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, func
from sqlmodel import SQLModel, Field, Index

from core.config import settings


def generate_reservation_id() -> str:
    return str(uuid.uuid4())


class Reservation(SQLModel, table=True):
    __tablename__ = "reservations"

    id: str = Field(
        default_factory=generate_reservation_id,
        primary_key=True,
        max_length=64,
        sa_column_kwargs={"nullable": False}
    )
    table_id: str = Field(foreign_key="tables.id", nullable=False)
    table_number: int = Field(nullable=False)
    client_name: str = Field(default="", max_length=100, nullable=False)
    phone_number: str = Field(default="", max_length=20, nullable=False)
    username: str = Field(max_length=100, nullable=False)
    date: str = Field(max_length=10, nullable=False)  # YYYY-MM-DD
    slot_time_start: str = Field(max_length=5, nullable=False)  # HH:MM, zero-padded
    slot_time_end: str = Field(max_length=5, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(settings.APP_TIMEZONE),
        sa_column=Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    )

    __table_args__ = (
        Index("idx_reservation_table_date", "table_id", "date"),
        Index("idx_reservation_username", "username"),
    )

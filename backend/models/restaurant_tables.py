import uuid
from sqlmodel import SQLModel, Field


def generate_table_id() -> str:
    return uuid.uuid4().hex


class RestaurantTable(SQLModel, table=True):
    __tablename__ = "tables"

    id: str = Field(
        default_factory=generate_table_id,
        primary_key=True,
        max_length=64,
        sa_column_kwargs={"nullable": False}
    )
    # Human-facing number; uniqueness is checked in crud.tables.create_table
    number: int = Field(nullable=False, index=True)
    places: int = Field(nullable=False)
    is_vip: bool = Field(default=False, nullable=False)
    min_order: float = Field(default=0, nullable=False)

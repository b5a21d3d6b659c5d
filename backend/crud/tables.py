from sqlmodel import select, Session
from models.restaurant_tables import RestaurantTable
from schemas.tables import TableCreate
from core.exceptions import TableNumberTakenError


def resolve_table_by_number(
    db: Session,
    number: int
) -> RestaurantTable | None:
    """Get the table with the given human-facing number."""
    return db.exec(
        select(RestaurantTable)
        .where(RestaurantTable.number == number)
        .order_by(RestaurantTable.id)
    ).first()


def list_tables(db: Session) -> list[RestaurantTable]:
    """List all tables ordered by number."""
    return list(db.exec(select(RestaurantTable).order_by(RestaurantTable.number)).all())


def get_table_by_id(
    db: Session,
    table_id: str
) -> RestaurantTable | None:
    """Get table by ID."""
    return db.get(RestaurantTable, table_id)


def create_table(
    db: Session,
    table_data: TableCreate
) -> RestaurantTable:
    """Create a table, or overwrite the table that already has the given id.

    A number held by a different table is rejected.
    """
    holder = resolve_table_by_number(db, table_data.number)
    if holder and holder.id != table_data.id:
        raise TableNumberTakenError(table_data.number)

    table = db.get(RestaurantTable, table_data.id) if table_data.id else None
    if table is None:
        table = RestaurantTable(**table_data.model_dump(exclude_none=True))
    else:
        table.number = table_data.number
        table.places = table_data.places
        table.is_vip = table_data.is_vip
        table.min_order = table_data.min_order

    db.add(table)
    db.commit()
    db.refresh(table)

    return table

import logging
from fastapi import APIRouter

from api.deps import SessionDep, CurrentUsername
from core.exceptions import NotFoundError
from crud import tables as crud_tables
from schemas.tables import (
    TableCreate,
    TableCreateResponse,
    TableResponse,
    TableListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("", response_model=TableListResponse)
def list_tables(current_username: CurrentUsername, db: SessionDep):
    """List all tables."""
    tables = crud_tables.list_tables(db)
    return TableListResponse(tables=[TableResponse.model_validate(t) for t in tables])


@router.get("/{table_id}", response_model=TableResponse)
def get_table(table_id: str, current_username: CurrentUsername, db: SessionDep):
    """Get table details."""
    table = crud_tables.get_table_by_id(db, table_id)
    if not table:
        raise NotFoundError("Table not found")
    return table


@router.post("", response_model=TableCreateResponse)
def create_table(table_data: TableCreate, current_username: CurrentUsername, db: SessionDep):
    """Create a table, or replace the one with the same id."""
    table = crud_tables.create_table(db, table_data)
    logger.info(f"Table {table.number} saved as {table.id} by {current_username}")
    return TableCreateResponse(id=table.id)

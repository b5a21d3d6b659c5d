import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from core.exceptions import (
    SlotConflictError,
    StoreUnavailableError,
    TableNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from crud import reservations as crud_reservations
from crud import tables as crud_tables
from models.reservations import Reservation
from schemas.reservations import ReservationCreate
from services.slots import TimeSlot, parse_date

logger = logging.getLogger(__name__)

# Attribute name -> name used in the request body
REQUIRED_FIELDS = {
    "table_number": "tableNumber",
    "date": "date",
    "slot_time_start": "slotTimeStart",
    "slot_time_end": "slotTimeEnd",
}


class ReservationService:
    """Books tables and lists bookings.

    The conflict check and the insert are two separate statements, so two
    overlapping requests racing each other can both be accepted.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_reservation(self, data: ReservationCreate, username: Optional[str]) -> str:
        """Book a table for a time slot and return the new reservation id.

        Raises:
            UnauthorizedError: no authenticated user.
            ValidationError: a required field is missing or malformed.
            TableNotFoundError: no table has the requested number.
            SlotConflictError: the slot overlaps an existing booking.
            StoreUnavailableError: the database failed.
        """
        if not username:
            raise UnauthorizedError()

        date, slot = self._validate(data)

        try:
            table = crud_tables.resolve_table_by_number(self.db, data.table_number)
            if table is None:
                logger.info(f"Reservation rejected: table {data.table_number} not found")
                raise TableNotFoundError(data.table_number)

            conflicts = crud_reservations.find_conflicting_reservations(self.db, table.id, date, slot)
            if conflicts:
                logger.info(
                    f"Reservation rejected: table {table.number} on {date} "
                    f"{slot.start_text}-{slot.end_text} overlaps {[r.id for r in conflicts]}"
                )
                raise SlotConflictError(table.number, date)

            reservation = crud_reservations.create_reservation(
                self.db,
                Reservation(
                    table_id=table.id,
                    table_number=table.number,
                    client_name=data.client_name or "",
                    phone_number=data.phone_number or "",
                    username=username,
                    date=date,
                    slot_time_start=slot.start_text,
                    slot_time_end=slot.end_text,
                )
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create reservation")
            raise StoreUnavailableError()

        logger.info(
            f"Reservation {reservation.id} created by {username} for table {table.number} "
            f"on {date} {slot.start_text}-{slot.end_text}"
        )
        return reservation.id

    def list_reservations(self, username: Optional[str], user: Optional[str] = None) -> list[Reservation]:
        """List all reservations, or only those created by `user`."""
        if not username:
            raise UnauthorizedError()

        try:
            return crud_reservations.list_reservations(self.db, username=user)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to list reservations")
            raise StoreUnavailableError()

    @staticmethod
    def _validate(data: ReservationCreate) -> tuple[str, TimeSlot]:
        missing = [
            name for field, name in REQUIRED_FIELDS.items()
            if getattr(data, field) is None or str(getattr(data, field)).strip() == ""
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        if data.table_number <= 0:
            raise ValidationError("tableNumber must be a positive integer")

        try:
            return parse_date(data.date), TimeSlot.parse(data.slot_time_start, data.slot_time_end)
        except ValueError as e:
            raise ValidationError(str(e))

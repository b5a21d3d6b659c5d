from typing import Optional
from sqlmodel import select, Session
from models.reservations import Reservation
from services.slots import TimeSlot


def find_conflicting_reservations(
    db: Session,
    table_id: str,
    date: str,
    slot: TimeSlot
) -> list[Reservation]:
    """Get reservations on the same table and date whose slot overlaps the given one."""
    same_day = db.exec(
        select(Reservation).where(
            Reservation.table_id == table_id,
            Reservation.date == date,
        )
    ).all()
    return [
        reservation for reservation in same_day
        if slot.overlaps(TimeSlot.parse(reservation.slot_time_start, reservation.slot_time_end))
    ]


def list_reservations(
    db: Session,
    username: Optional[str] = None
) -> list[Reservation]:
    """List reservations, optionally only those created by one user."""
    query = select(Reservation)

    if username:
        query = query.where(Reservation.username == username)

    query = query.order_by(Reservation.date, Reservation.slot_time_start)
    return list(db.exec(query).all())


def create_reservation(
    db: Session,
    reservation: Reservation
) -> Reservation:
    """Insert a reservation. No conflict check is done here."""
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation

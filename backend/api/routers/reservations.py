from typing import Optional
from fastapi import APIRouter

from api.deps import CurrentUsername, ReservationServiceDep
from schemas.reservations import (
    ReservationCreate,
    ReservationCreateResponse,
    ReservationListResponse,
    ReservationResponse,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", response_model=ReservationCreateResponse)
def create_reservation(
    reservation_data: ReservationCreate,
    current_username: CurrentUsername,
    service: ReservationServiceDep
):
    """Book a table for a time slot."""
    reservation_id = service.create_reservation(reservation_data, current_username)
    return ReservationCreateResponse(
        reservation_id=reservation_id,
        message="Reservation created successfully"
    )


@router.get("", response_model=ReservationListResponse)
def list_reservations(
    current_username: CurrentUsername,
    service: ReservationServiceDep,
    user: Optional[str] = None
):
    """List reservations, optionally only those made by `user`."""
    reservations = service.list_reservations(current_username, user=user)
    return ReservationListResponse(
        reservations=[ReservationResponse.model_validate(r) for r in reservations]
    )

from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ReservationCreate(BaseModel):
    """Booking request as sent by the client.

    Every field is optional here; presence and format are checked by
    ReservationService so that an unauthenticated request is rejected
    before its body is validated.
    """
    table_number: Optional[int] = None
    client_name: Optional[str] = None
    phone_number: Optional[str] = None
    date: Optional[str] = None
    slot_time_start: Optional[str] = None
    slot_time_end: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ReservationCreateResponse(BaseModel):
    reservation_id: str
    message: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ReservationResponse(BaseModel):
    table_number: int
    client_name: str
    phone_number: str
    date: str
    slot_time_start: str
    slot_time_end: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ReservationListResponse(BaseModel):
    reservations: list[ReservationResponse]

from typing import Annotated, Optional
from sqlmodel import Session
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from db.session import get_db
from core.exceptions import UnauthorizedError
from core.security import get_username_from_token
from services.reservation_service import ReservationService

# Missing credentials are reported as 401 by get_current_username, not 403 by HTTPBearer
security = HTTPBearer(auto_error=False)

SessionDep = Annotated[Session, Depends(get_db)]


def get_current_username(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Get the authenticated username from the bearer token."""
    if credentials is None:
        raise UnauthorizedError()

    username = get_username_from_token(credentials.credentials)
    if username is None:
        raise UnauthorizedError()

    return username


def get_reservation_service(db: SessionDep) -> ReservationService:
    return ReservationService(db)


CurrentUsername = Annotated[str, Depends(get_current_username)]
ReservationServiceDep = Annotated[ReservationService, Depends(get_reservation_service)]

import logging
from fastapi import APIRouter

from api.deps import SessionDep
from core.exceptions import ValidationError
from core.security import create_access_token
from crud.auth import create_user_with_password, authenticate_user
from schemas.auth import (
    SignupRequest,
    SigninRequest,
    SigninResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
def signup(
    signup_data: SignupRequest,
    db: SessionDep
):
    """Register a new user with email and password."""
    try:
        user = create_user_with_password(
            db=db,
            email=signup_data.email,
            password=signup_data.password,
            first_name=signup_data.first_name,
            last_name=signup_data.last_name
        )
    except ValueError as e:
        logger.info(f"Signup rejected for {signup_data.email}: {e}")
        raise ValidationError(str(e))

    logger.info(f"User {user.email} signed up")
    return MessageResponse(message="User created successfully")


@router.post("/signin", response_model=SigninResponse)
def signin(
    signin_data: SigninRequest,
    db: SessionDep
):
    """Sign in with email and password.

    Returns:
        A bearer token whose subject is the user's email
    """
    user = authenticate_user(
        db=db,
        email=signin_data.email,
        password=signin_data.password
    )

    if not user:
        logger.info(f"Signin failed for {signin_data.email}")
        raise ValidationError("Invalid email or password.")

    id_token = create_access_token(data={"sub": user.email, "uid": str(user.id)})
    return SigninResponse(id_token=id_token)

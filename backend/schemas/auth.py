from pydantic import BaseModel, EmailStr
from pydantic.alias_generators import to_camel


class SignupRequest(BaseModel):
    """Request to register a new user with email and password."""
    first_name: str
    last_name: str
    email: EmailStr
    password: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SigninRequest(BaseModel):
    """Request to sign in with email and password."""
    email: str
    password: str


class SigninResponse(BaseModel):
    """Response carrying the bearer token for later requests."""
    id_token: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str

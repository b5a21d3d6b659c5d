from sqlmodel import select, Session
from models.users import User
from core.security import (
    get_password_hash,
    verify_password,
    password_policy_violations,
)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.exec(select(User).where(User.email == email)).first()


def create_user_with_password(
    db: Session,
    email: str,
    password: str,
    first_name: str,
    last_name: str
) -> User:
    """Create a new user with email and password."""
    email = email.strip().lower()
    problems = password_policy_violations(password)
    if problems:
        raise ValueError("Password must contain " + ", ".join(problems))

    # Check if user already exists
    if get_user_by_email(db, email):
        raise ValueError("User with this email already exists")

    user = User(
        email=email,
        first_name=first_name,
        last_name=last_name,
        hashed_password=get_password_hash(password)
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def authenticate_user(
    db: Session,
    email: str,
    password: str
) -> User | None:
    """Authenticate a user with email and password."""
    user = get_user_by_email(db, email.strip().lower())

    if not user:
        return None

    if not verify_password(password, user.hashed_password):
        return None

    return user

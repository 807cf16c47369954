"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktrack.config import get_settings
from tasktrack.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    MissingToken,
    UserNotFound,
)
from tasktrack.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token carrying the user id as ``sub``."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def verify_token(token: str | None) -> str:
    """Return the user id a token was issued for.

    Raises MissingToken when no token was presented and InvalidToken when it is
    malformed, expired, signed with another key or lacks a subject.
    """
    if token is None or not token.strip():
        raise MissingToken()

    payload = decode_access_token(token.strip())
    if payload is None:
        raise InvalidToken()

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidToken()
    return str(user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def register_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a new user, refusing an email that is already registered."""
    if get_user_by_email(db, email):
        raise DuplicateEmail()

    user = User(name=name, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise DuplicateEmail() from e
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        raise UserNotFound()
    if not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for user {user.id}")
        raise InvalidCredentials()
    return user


def login(db: Session, email: str, password: str) -> str:
    """Authenticate and mint a fresh access token."""
    user = authenticate_user(db, email, password)
    logger.info(f"User {user.id} logged in")
    return create_access_token(user.id)

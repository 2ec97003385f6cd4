"""Authentication helpers: password hashing and session token handling."""

import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from . import crud
from .core import get_settings
from .database import get_db
from .logger import logger
from .models import User

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
)
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plain password with its hashed value."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a password hash using the configured context."""
    return pwd_context.hash(password)


def issue_token(db: Session, user: User) -> str:
    """
    Generate a new session token and store it on the user.

    Any previously issued token is overwritten, so a user has at most
    one active session.

    Args:
        db (Session): Database session.
        user (User): Authenticated user.

    Returns:
        str: The new opaque token.
    """
    token = str(uuid.uuid4())
    crud.update_user_token(db, user, token)
    logger.info("Issued session token for user {}", user.username)
    return token


def revoke_token(db: Session, user: User) -> None:
    """Invalidate the session token of the user."""
    crud.update_user_token(db, user, None)
    logger.info("Revoked session token for user {}", user.username)


def authenticate_user(db: Session, username: str, password: str) -> User:
    """
    Check credentials and return the matching user.

    Raises:
        HTTPException: If the username is unknown or the password is wrong.
    """
    user = crud.get_user(db, username)
    if not user or not verify_password(password, user.password):
        logger.warning("Rejected login for user {}", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Username or password is wrong",
        )
    return user


def get_current_user(
    token: str | None = Depends(token_header), db: Session = Depends(get_db)
) -> User:
    """Dependency that resolves the session token into the authenticated user."""

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
    )
    if not token:
        raise credentials_exception
    user = crud.get_user_by_token(db, token)
    if user is None:
        raise credentials_exception
    return user

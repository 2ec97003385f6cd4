"""User registration, session and profile routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import schemas, crud
from .auth import (
    authenticate_user,
    get_current_user,
    get_password_hash,
    issue_token,
    revoke_token,
)
from .database import get_db
from .models import User

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=schemas.WebResponse[schemas.UserOut])
def register(user_in: schemas.UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user.

    Args:
        user_in (UserRegister): Registration data.
        db (Session): Database session.

    Raises:
        HTTPException: If the username is already taken.

    Returns:
        WebResponse[UserOut]: The registered user without a token.
    """
    hashed_password = get_password_hash(user_in.password)
    user = crud.create_user(db, user_in, hashed_password)
    return {"data": schemas.UserOut(username=user.username, name=user.name)}


@router.post("/login", response_model=schemas.WebResponse[schemas.UserSession])
def login(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate a user and open a new session.

    A fresh token replaces any token issued before.

    Raises:
        HTTPException: If the credentials are wrong.

    Returns:
        WebResponse[UserSession]: The user together with the session token.
    """
    user = authenticate_user(db, credentials.username, credentials.password)
    token = issue_token(db, user)
    return {
        "data": schemas.UserSession(
            username=user.username, name=user.name, token=token
        )
    }


@router.get("/current", response_model=schemas.WebResponse[schemas.UserOut])
def read_current(current_user: User = Depends(get_current_user)):
    """
    Retrieve details of the currently authenticated user.

    Args:
        current_user (User): User resolved from the session token.

    Returns:
        WebResponse[UserOut]: User profile information.
    """
    return {
        "data": schemas.UserOut(
            username=current_user.username, name=current_user.name
        )
    }


@router.patch("/current", response_model=schemas.WebResponse[schemas.UserOut])
def update_current(
    changes: schemas.UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update the name and/or password of the authenticated user.

    Only fields provided in the request are changed.
    """
    values = changes.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in values:
        values["password"] = get_password_hash(values["password"])
    user = crud.update_user(db, current_user, values)
    return {"data": schemas.UserOut(username=user.username, name=user.name)}


@router.delete("/current/logout", response_model=schemas.WebResponse[bool])
def logout(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Invalidate the session token of the authenticated user."""
    revoke_token(db, current_user)
    return {"data": True}

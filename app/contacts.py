"""Contact management routes for the Contact Management API."""

import math
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from . import schemas, crud
from .database import get_db
from .auth import get_current_user
from .models import User

router = APIRouter(prefix="/contacts", tags=["contacts"])


def get_owned_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Dependency resolving a contact of the current user.

    Raises:
        HTTPException: If the contact does not exist or belongs to
            another user.
    """
    c = crud.get_contact(db, contact_id, current_user)
    if not c:
        raise HTTPException(status_code=404, detail="Contact is not found")
    return c


@router.post("", response_model=schemas.WebResponse[schemas.ContactOut])
def create_contact(
    contact_in: schemas.ContactCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new contact owned by the current user.

    Args:
        contact_in (ContactCreate): Contact input data.
        db (Session): Database session.
        current_user (User): Authenticated user.

    Returns:
        WebResponse[ContactOut]: Created contact.
    """
    c = crud.create_contact(db, contact_in, current_user)
    return {"data": schemas.ContactOut.model_validate(c)}


@router.get("", response_model=schemas.PageResponse[schemas.ContactOut])
def search_contacts(
    search: Annotated[schemas.ContactSearch, Query()],
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Search contacts belonging to the current user.

    ``name`` matches the first or last name; ``email`` and ``phone`` match
    their own fields. All filters are optional case-insensitive substrings.

    Args:
        search (ContactSearch): Filters and paging from the query string.
        db (Session): Database session.
        current_user (User): Authenticated user.

    Returns:
        PageResponse[ContactOut]: Requested page and paging metadata.
    """
    contacts, total = crud.search_contacts(db, current_user, search)
    return {
        "data": [schemas.ContactOut.model_validate(c) for c in contacts],
        "paging": schemas.Paging(
            current_page=search.page,
            size=search.size,
            total_page=math.ceil(total / search.size),
        ),
    }


@router.get("/{contact_id}", response_model=schemas.WebResponse[schemas.ContactOut])
def get_contact(contact=Depends(get_owned_contact)):
    """
    Retrieve a single contact by ID for the current user.

    Raises:
        HTTPException: If contact is not found.

    Returns:
        WebResponse[ContactOut]: Contact data.
    """
    return {"data": schemas.ContactOut.model_validate(contact)}


@router.put("/{contact_id}", response_model=schemas.WebResponse[schemas.ContactOut])
def update_contact(
    changes: schemas.ContactUpdate,
    contact=Depends(get_owned_contact),
    db: Session = Depends(get_db),
):
    """
    Update an existing contact.

    Only fields provided in the request will be updated.

    Args:
        changes (ContactUpdate): Fields to update.
        contact (Contact): Contact owned by the current user.
        db (Session): Database session.

    Raises:
        HTTPException: If contact is not found.

    Returns:
        WebResponse[ContactOut]: Updated contact.
    """
    c = crud.update_contact(db, contact, changes.model_dump(exclude_unset=True))
    return {"data": schemas.ContactOut.model_validate(c)}


@router.delete("/{contact_id}", response_model=schemas.WebResponse[bool])
def remove_contact(
    contact=Depends(get_owned_contact),
    db: Session = Depends(get_db),
):
    """
    Delete a contact owned by the current user, with its addresses.

    Raises:
        HTTPException: If contact is not found.

    Returns:
        WebResponse[bool]: Deletion status.
    """
    crud.delete_contact(db, contact)
    return {"data": True}

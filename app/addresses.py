"""Address routes, nested under the contact that owns the addresses."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from . import schemas, crud
from .contacts import get_owned_contact
from .database import get_db

router = APIRouter(prefix="/contacts/{contact_id}/addresses", tags=["addresses"])


def get_owned_address(
    address_id: int,
    contact=Depends(get_owned_contact),
    db: Session = Depends(get_db),
):
    """Dependency resolving an address through the current user's contact."""
    address = crud.get_address(db, address_id, contact)
    if not address:
        raise HTTPException(status_code=404, detail="Address is not found")
    return address


@router.post("", response_model=schemas.WebResponse[schemas.AddressOut])
def create_address(
    address_in: schemas.AddressCreate,
    contact=Depends(get_owned_contact),
    db: Session = Depends(get_db),
):
    """
    Add an address to a contact of the current user.

    Args:
        address_in (AddressCreate): Address input data.
        contact (Contact): Contact owned by the current user.
        db (Session): Database session.

    Raises:
        HTTPException: If contact is not found.

    Returns:
        WebResponse[AddressOut]: Created address.
    """
    address = crud.create_address(db, address_in, contact)
    return {"data": schemas.AddressOut.model_validate(address)}


@router.get("", response_model=schemas.WebResponse[List[schemas.AddressOut]])
def list_addresses(
    contact=Depends(get_owned_contact),
    db: Session = Depends(get_db),
):
    """List every address of a contact."""
    addresses = crud.list_addresses(db, contact)
    return {"data": [schemas.AddressOut.model_validate(a) for a in addresses]}


@router.get(
    "/{address_id}", response_model=schemas.WebResponse[schemas.AddressOut]
)
def get_address(address=Depends(get_owned_address)):
    """
    Retrieve a single address of a contact.

    Raises:
        HTTPException: If the contact or the address is not found.
    """
    return {"data": schemas.AddressOut.model_validate(address)}


@router.put(
    "/{address_id}", response_model=schemas.WebResponse[schemas.AddressOut]
)
def update_address(
    changes: schemas.AddressUpdate,
    address=Depends(get_owned_address),
    db: Session = Depends(get_db),
):
    """
    Update an address. Only fields provided in the request are changed.

    Raises:
        HTTPException: If the contact or the address is not found.
    """
    updated = crud.update_address(db, address, changes.model_dump(exclude_unset=True))
    return {"data": schemas.AddressOut.model_validate(updated)}


@router.delete("/{address_id}", response_model=schemas.WebResponse[bool])
def remove_address(
    address=Depends(get_owned_address),
    db: Session = Depends(get_db),
):
    """Delete an address of a contact."""
    crud.delete_address(db, address)
    return {"data": True}

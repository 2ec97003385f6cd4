"""CRUD operations for users, contacts and addresses.

This module contains database interaction logic for the application
entities, isolated from FastAPI route handlers. Every contact query is
filtered by the owning username, and every address query by its contact.
"""

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from . import models, schemas
from .logger import logger


def create_user(
    db: Session, user_in: schemas.UserRegister, hashed_password: str
) -> models.User:
    """
    Create and persist a new user.

    Args:
        db (Session): SQLAlchemy database session.
        user_in (UserRegister): Incoming user data.
        hashed_password (str): Securely hashed password.

    Raises:
        HTTPException: If a user with the same username already exists.

    Returns:
        User: Newly created user instance.
    """
    existing = db.scalar(
        select(func.count())
        .select_from(models.User)
        .where(models.User.username == user_in.username)
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists",
        )

    user = models.User(
        username=user_in.username,
        name=user_in.name,
        password=hashed_password,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user {}", user.username)
    return user


def get_user(db: Session, username: str) -> models.User | None:
    """
    Retrieve a user by username.

    Args:
        db (Session): Database session.
        username (str): Username.

    Returns:
        User | None: User if found, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.username == username)
    ).scalar_one_or_none()


def get_user_by_token(db: Session, token: str) -> models.User | None:
    """Retrieve the user currently holding the given session token."""
    return db.execute(
        select(models.User).where(models.User.token == token)
    ).scalars().first()


def update_user_token(
    db: Session, user: models.User, token: str | None
) -> models.User:
    """
    Store a session token on the user, or clear it with ``None``.

    Args:
        db (Session): Database session.
        user (User): Target user.
        token (str | None): New token value.

    Returns:
        User: Updated user instance.
    """
    user.token = token
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user: models.User, changes: dict) -> models.User:
    """
    Update the profile of a user.

    ``changes`` may contain ``name`` and an already hashed ``password``.
    """
    for key, value in changes.items():
        setattr(user, key, value)

    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Updated user {} ({})", user.username, ", ".join(changes))
    return user


def create_contact(
    db: Session, contact_in: schemas.ContactCreate, user: models.User
) -> models.Contact:
    """
    Create a new contact owned by the given user.

    Args:
        db (Session): Database session.
        contact_in (ContactCreate): Contact data.
        user (User): Owner of the contact.

    Returns:
        Contact: Newly created contact.
    """
    contact = models.Contact(**contact_in.model_dump(), username=user.username)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info("User {} created contact {}", user.username, contact.id)
    return contact


def get_contact(db: Session, contact_id: int, user: models.User):
    """
    Retrieve a single contact owned by the given user.

    Args:
        db (Session): Database session.
        contact_id (int): Contact identifier.
        user (User): Contact owner.

    Returns:
        Contact | None: Contact if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Contact).where(
            models.Contact.id == contact_id,
            models.Contact.username == user.username,
        )
    ).scalar_one_or_none()


def search_contacts(
    db: Session, user: models.User, search: schemas.ContactSearch
) -> tuple[list[models.Contact], int]:
    """
    Search the contacts of the given user.

    Each provided filter is a case-insensitive substring match; filters
    are combined with ``AND`` and absent filters do not constrain the
    result. ``name`` matches either the first or the last name.

    Args:
        db (Session): Database session.
        user (User): Contact owner.
        search (ContactSearch): Filters and paging parameters.

    Returns:
        tuple[list[Contact], int]: The requested page and the total
        number of matching contacts.
    """
    filters = [models.Contact.username == user.username]

    # % and _ in the input are matched literally
    if search.name:
        filters.append(
            or_(
                models.Contact.first_name.icontains(search.name, autoescape=True),
                models.Contact.last_name.icontains(search.name, autoescape=True),
            )
        )
    if search.email:
        filters.append(models.Contact.email.icontains(search.email, autoescape=True))
    if search.phone:
        filters.append(models.Contact.phone.icontains(search.phone, autoescape=True))

    total = db.scalar(
        select(func.count()).select_from(models.Contact).where(*filters)
    ) or 0

    offset = (search.page - 1) * search.size
    if offset >= total:
        return [], total

    stmt = (
        select(models.Contact)
        .where(*filters)
        .order_by(models.Contact.id)
        .offset(offset)
        .limit(search.size)
    )
    return list(db.scalars(stmt).all()), total


def update_contact(db: Session, contact: models.Contact, changes: dict):
    """
    Update mutable fields of a contact.

    Args:
        db (Session): Database session.
        contact (Contact): Contact instance.
        changes (dict): Fields to update.

    Returns:
        Contact: Updated contact.
    """
    for key, value in changes.items():
        setattr(contact, key, value)

    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info("Updated contact {}", contact.id)
    return contact


def delete_contact(db: Session, contact: models.Contact):
    """
    Delete a contact and its addresses from the database.

    Args:
        db (Session): Database session.
        contact (Contact): Contact to delete.
    """
    contact_id = contact.id
    db.delete(contact)
    db.commit()
    logger.info("Deleted contact {}", contact_id)
    return None


def create_address(
    db: Session, address_in: schemas.AddressCreate, contact: models.Contact
) -> models.Address:
    """
    Create a new address for the given contact.

    Args:
        db (Session): Database session.
        address_in (AddressCreate): Address data.
        contact (Contact): Contact the address belongs to.

    Returns:
        Address: Newly created address.
    """
    address = models.Address(**address_in.model_dump(), contact_id=contact.id)
    db.add(address)
    db.commit()
    db.refresh(address)
    logger.info("Contact {} got address {}", contact.id, address.id)
    return address


def get_address(db: Session, address_id: int, contact: models.Contact):
    """Retrieve an address of the given contact, or ``None``."""
    return db.execute(
        select(models.Address).where(
            models.Address.id == address_id,
            models.Address.contact_id == contact.id,
        )
    ).scalar_one_or_none()


def list_addresses(db: Session, contact: models.Contact) -> list[models.Address]:
    """Return all addresses of the given contact."""
    return list(
        db.scalars(
            select(models.Address)
            .where(models.Address.contact_id == contact.id)
            .order_by(models.Address.id)
        ).all()
    )


def update_address(db: Session, address: models.Address, changes: dict):
    """Apply the provided fields to an address and persist it."""
    for key, value in changes.items():
        setattr(address, key, value)

    db.add(address)
    db.commit()
    db.refresh(address)
    logger.info("Updated address {}", address.id)
    return address


def delete_address(db: Session, address: models.Address):
    """Delete an address from the database."""
    address_id = address.id
    db.delete(address)
    db.commit()
    logger.info("Deleted address {}", address_id)
    return None

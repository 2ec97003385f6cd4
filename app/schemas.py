from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

T = TypeVar("T")


def _reject_null(value):
    if value is None:
        raise ValueError("field cannot be null")
    return value


class WebResponse(BaseModel, Generic[T]):
    """Success envelope wrapping a single payload."""

    data: T


class Paging(BaseModel):
    """Pagination metadata returned with list responses."""

    current_page: int
    size: int
    total_page: int


class PageResponse(BaseModel, Generic[T]):
    """Success envelope for paged lists."""

    data: List[T]
    paging: Paging


class UserRegister(BaseModel):
    """Payload for registering a new user."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)


class UserLogin(BaseModel):
    """Credentials submitted on login."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)


class UserUpdate(BaseModel):
    """Schema for updating the current user (all fields optional)."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=1, max_length=100)


class UserOut(BaseModel):
    """Response schema for user data."""

    username: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class UserSession(UserOut):
    """Response schema for a successful login, carrying the session token."""

    token: str


class ContactCreate(BaseModel):
    """Schema for creating new contact."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("email")
    @classmethod
    def email_length(cls, value):
        if value is not None and len(value) > 100:
            raise ValueError("email must be at most 100 characters")
        return value


class ContactUpdate(ContactCreate):
    """Schema for updating contact (all fields optional)."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)

    _first_name_not_null = field_validator("first_name")(_reject_null)


class ContactOut(BaseModel):
    """Schema for returning contact with ID."""

    id: int
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ContactSearch(BaseModel):
    """Filters and paging parameters of a contact search."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    page: int = Field(1, ge=1)
    size: int = Field(10, ge=1, le=100)


class AddressCreate(BaseModel):
    """Schema for creating an address of a contact."""

    street: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    province: Optional[str] = Field(None, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class AddressUpdate(AddressCreate):
    """Schema for updating an address (all fields optional)."""

    country: Optional[str] = Field(None, min_length=1, max_length=100)
    postal_code: Optional[str] = Field(None, min_length=1, max_length=10)

    _required_not_null = field_validator("country", "postal_code")(_reject_null)


class AddressOut(BaseModel):
    """Schema for returning address with ID."""

    id: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: str
    postal_code: str

    model_config = ConfigDict(from_attributes=True)

"""Contact form schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from portfolio_api.schemas.base import APIModel


class ContactMessageCreate(APIModel):
    """
    Public contact form submission.

    Only these four fields are accepted; ``isRead``, ``id`` and
    ``createdAt`` in the body are dropped.
    """

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1, max_length=10000)


class ContactSubmitResponse(APIModel):
    message: str
    id: int


class ContactMessageResponse(APIModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    is_read: bool
    created_at: datetime | None

"""Shared base classes for request/response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Unknown keys in request bodies are ignored, so server-owned fields such
    as ``id`` or ``createdAt`` sent by a client never reach the database.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided in the request, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(APIModel):
    """Plain acknowledgement."""

    message: str


def reject_null(v: Any) -> Any:
    """Partial updates may omit a required field but not set it to null."""
    if v is None:
        raise ValueError("Field cannot be null")
    return v

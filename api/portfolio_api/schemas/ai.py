"""AI assistant schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from portfolio_api.schemas.base import APIModel, reject_null


class ChatRequest(APIModel):
    message: str = Field(min_length=1, max_length=4000)
    context: str | None = None


class ChatResponse(APIModel):
    response: str


class AnalyzeSectionRequest(APIModel):
    """Ask the assistant to review one portfolio section."""

    section: str = Field(min_length=1)
    content: Any


class AiConfigUpdate(APIModel):
    system_prompt: str | None = None
    api_key: str | None = None
    enabled: bool | None = None

    check_not_null = field_validator("enabled")(reject_null)


class AiConfigResponse(APIModel):
    """Stored assistant configuration. The API key itself is never returned."""

    id: int
    system_prompt: str | None
    enabled: bool
    has_api_key: bool
    updated_at: datetime | None

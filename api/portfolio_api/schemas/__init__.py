"""Pydantic schemas for request/response validation."""

from portfolio_api.schemas.ai import (
    AiConfigResponse,
    AiConfigUpdate,
    AnalyzeSectionRequest,
    ChatRequest,
    ChatResponse,
)
from portfolio_api.schemas.auth import IdentityResponse, LoginRequest, LoginResponse, UserInfo
from portfolio_api.schemas.base import APIModel, MessageResponse
from portfolio_api.schemas.contact import (
    ContactMessageCreate,
    ContactMessageResponse,
    ContactSubmitResponse,
)
from portfolio_api.schemas.content import (
    AchievementCreate,
    AchievementResponse,
    AchievementUpdate,
    ImageUploadResponse,
    IntroductionResponse,
    IntroductionUpdate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    ResumeUploadResponse,
    SkillCreate,
    SkillResponse,
    SkillUpdate,
    SocialsResponse,
    SocialsUpdate,
)

__all__ = [
    "APIModel",
    "MessageResponse",
    "LoginRequest",
    "LoginResponse",
    "UserInfo",
    "IdentityResponse",
    "IntroductionUpdate",
    "IntroductionResponse",
    "SocialsUpdate",
    "SocialsResponse",
    "SkillCreate",
    "SkillUpdate",
    "SkillResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "AchievementCreate",
    "AchievementUpdate",
    "AchievementResponse",
    "ImageUploadResponse",
    "ResumeUploadResponse",
    "ContactMessageCreate",
    "ContactMessageResponse",
    "ContactSubmitResponse",
    "ChatRequest",
    "ChatResponse",
    "AnalyzeSectionRequest",
    "AiConfigUpdate",
    "AiConfigResponse",
]

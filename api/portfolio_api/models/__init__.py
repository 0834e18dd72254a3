"""Database models for the Portfolio API."""

from portfolio_api.models.ai_config import AiConfig
from portfolio_api.models.contact import ContactMessage
from portfolio_api.models.content import (
    Achievement,
    Introduction,
    Project,
    Skill,
    Socials,
)
from portfolio_api.models.user import User

__all__ = [
    "User",
    "Introduction",
    "Socials",
    "Skill",
    "Project",
    "Achievement",
    "ContactMessage",
    "AiConfig",
]

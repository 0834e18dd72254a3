"""Portfolio content schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from portfolio_api.schemas.base import APIModel, reject_null

SkillCategory = Literal["frontend", "backend", "tools"]
IconType = Literal["trophy", "certificate", "award", "medal"]


# --- Introduction ---


class IntroductionUpdate(APIModel):
    """Partial update of the site introduction. Omitted fields are left as stored."""

    name: str | None = None
    role: str | None = None
    specialty: str | None = None
    bio: str | None = None
    detailed_bio: str | None = None
    profile_image_url: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None

    check_not_null = field_validator("name", "role", "bio")(reject_null)


class IntroductionResponse(APIModel):
    id: int
    name: str
    role: str
    specialty: str | None
    bio: str
    detailed_bio: str | None
    profile_image_url: str | None
    email: str | None
    phone: str | None
    location: str | None
    updated_at: datetime | None


# --- Socials ---


class SocialsUpdate(APIModel):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    instagram: str | None = None


class SocialsResponse(APIModel):
    id: int
    github: str | None
    linkedin: str | None
    twitter: str | None
    instagram: str | None
    updated_at: datetime | None


# --- Skills ---


class SkillCreate(APIModel):
    """New skill. Proficiency is a percentage between 1 and 100."""

    name: str = Field(min_length=1)
    category: SkillCategory
    icon_url: str | None = None
    proficiency: int = Field(default=80, ge=1, le=100)
    order: int = 0


class SkillUpdate(APIModel):
    name: str | None = Field(default=None, min_length=1)
    category: SkillCategory | None = None
    icon_url: str | None = None
    proficiency: int | None = Field(default=None, ge=1, le=100)
    order: int | None = None

    check_not_null = field_validator("name", "category", "proficiency", "order")(reject_null)


class SkillResponse(APIModel):
    id: int
    name: str
    category: str
    icon_url: str | None
    proficiency: int
    order: int
    created_at: datetime | None


# --- Projects ---


class ProjectCreate(APIModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image_url: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    order: int = 0


class ProjectUpdate(APIModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    image_url: str | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool | None = None
    order: int | None = None

    check_not_null = field_validator(
        "title", "description", "technologies", "featured", "order"
    )(reject_null)


class ProjectResponse(APIModel):
    id: int
    title: str
    description: str
    image_url: str | None
    technologies: list[str]
    github_url: str | None
    live_url: str | None
    featured: bool
    order: int
    created_at: datetime | None


# --- Achievements ---


class AchievementCreate(APIModel):
    """New achievement. ``date`` is free text and is stored as given."""

    title: str = Field(min_length=1)
    issuer: str = Field(min_length=1)
    date: str = Field(min_length=1)
    certificate_url: str | None = None
    description: str | None = None
    icon_type: IconType = "trophy"
    order: int = 0


class AchievementUpdate(APIModel):
    title: str | None = Field(default=None, min_length=1)
    issuer: str | None = Field(default=None, min_length=1)
    date: str | None = Field(default=None, min_length=1)
    certificate_url: str | None = None
    description: str | None = None
    icon_type: IconType | None = None
    order: int | None = None

    check_not_null = field_validator("title", "issuer", "date", "icon_type", "order")(reject_null)


class AchievementResponse(APIModel):
    id: int
    title: str
    issuer: str
    date: str
    certificate_url: str | None
    description: str | None
    icon_type: str
    order: int
    created_at: datetime | None


# --- Uploads ---


class ImageUploadResponse(APIModel):
    image_url: str


class ResumeUploadResponse(APIModel):
    message: str
    url: str

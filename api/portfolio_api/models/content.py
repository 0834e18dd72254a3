"""Portfolio content models: introduction, socials, skills, projects, achievements."""

from sqlalchemy import (
    JSON,
    TIMESTAMP,
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    Text,
    text,
)

from portfolio_api.database import Base
from portfolio_api.models._time import utcnow

# Singleton tables keep their one logical row under this primary key.
SINGLETON_ID = 1

SKILL_CATEGORIES = ("frontend", "backend", "tools")
ICON_TYPES = ("trophy", "certificate", "award", "medal")


class Introduction(Base):
    """The site owner's profile shown in the hero and about sections."""

    __tablename__ = "introduction"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False, server_default=text("''"))
    role = Column(Text, nullable=False, server_default=text("''"))
    specialty = Column(Text)
    bio = Column(Text, nullable=False, server_default=text("''"))
    detailed_bio = Column(Text)
    profile_image_url = Column(Text)
    email = Column(Text)
    phone = Column(Text)
    location = Column(Text)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow)


class Socials(Base):
    """Social profile links."""

    __tablename__ = "socials"

    id = Column(Integer, primary_key=True, autoincrement=False)
    github = Column(Text)
    linkedin = Column(Text)
    twitter = Column(Text)
    instagram = Column(Text)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow)


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    icon_url = Column(Text)
    proficiency = Column(Integer, nullable=False, default=80, server_default=text("80"))
    order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    __table_args__ = (
        CheckConstraint(
            "category IN ('frontend', 'backend', 'tools')", name="ck_skill_category"
        ),
        CheckConstraint("proficiency BETWEEN 1 AND 100", name="ck_skill_proficiency"),
        Index("idx_skills_order", "order", "category"),
    )


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text)
    technologies = Column(JSON, nullable=False, default=list)
    github_url = Column(Text)
    live_url = Column(Text)
    featured = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)


class Achievement(Base):
    """A certificate, award or similar. ``date`` is kept as entered."""

    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    issuer = Column(Text, nullable=False)
    date = Column(Text, nullable=False)
    certificate_url = Column(Text)
    description = Column(Text)
    icon_type = Column(Text, nullable=False, default="trophy", server_default=text("'trophy'"))
    order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    __table_args__ = (
        CheckConstraint(
            "icon_type IN ('trophy', 'certificate', 'award', 'medal')",
            name="ck_achievement_icon_type",
        ),
    )

"""Load demo portfolio content into an empty database."""

from __future__ import annotations

import argparse
import asyncio
import sys

from portfolio_api.database import AsyncSessionLocal, init_db
from portfolio_api.repository.content import ContentRepository

INTRODUCTION = {
    "name": "Alex Morgan",
    "role": "Full Stack Developer",
    "specialty": "AI Enthusiast",
    "bio": "Full-stack developer building modern web applications.",
    "detailed_bio": (
        "I build web applications end to end with React, Python and cloud platforms, "
        "and like integrating AI features into everyday products."
    ),
    "email": "alex@example.com",
    "location": "Remote",
}

SOCIALS = {
    "github": "https://github.com/example",
    "linkedin": "https://linkedin.com/in/example",
}

SKILLS = [
    {"name": "React", "category": "frontend", "proficiency": 90, "order": 1},
    {"name": "TypeScript", "category": "frontend", "proficiency": 85, "order": 2},
    {"name": "TailwindCSS", "category": "frontend", "proficiency": 92, "order": 3},
    {"name": "Python", "category": "backend", "proficiency": 88, "order": 1},
    {"name": "FastAPI", "category": "backend", "proficiency": 85, "order": 2},
    {"name": "PostgreSQL", "category": "backend", "proficiency": 82, "order": 3},
    {"name": "Git", "category": "tools", "proficiency": 90, "order": 1},
    {"name": "Docker", "category": "tools", "proficiency": 75, "order": 2},
]

PROJECTS = [
    {
        "title": "AI-Powered Portfolio",
        "description": "Portfolio site with an AI chat assistant and an admin dashboard.",
        "technologies": ["React", "FastAPI", "PostgreSQL", "Gemini"],
        "github_url": "https://github.com/example/portfolio",
        "featured": True,
        "order": 1,
    },
    {
        "title": "Task Management App",
        "description": "Collaborative task board with real-time updates.",
        "technologies": ["React", "WebSockets", "Redis"],
        "featured": False,
        "order": 2,
    },
]

ACHIEVEMENTS = [
    {
        "title": "AWS Cloud Practitioner",
        "issuer": "Amazon Web Services",
        "date": "2023-10-20",
        "icon_type": "award",
        "order": 1,
    },
    {
        "title": "Best Innovation Award",
        "issuer": "TechFest 2023",
        "date": "2023-06-15",
        "description": "First place for an AI-powered web application.",
        "icon_type": "trophy",
        "order": 2,
    },
]

AI_CONFIG = {
    "system_prompt": (
        "You are a helpful AI assistant that answers questions about this portfolio "
        "and gives career advice on web development and software engineering."
    ),
    "enabled": True,
}


async def seed(force: bool) -> int:
    await init_db()
    async with AsyncSessionLocal() as session:
        repo = ContentRepository(session)
        if not force and (await repo.list_skills() or await repo.list_projects()):
            print("Portfolio content already present; use --force to add demo data anyway.", file=sys.stderr)
            return 1

        await repo.update_introduction(INTRODUCTION)
        await repo.update_socials(SOCIALS)
        for skill in SKILLS:
            await repo.create_skill(skill)
        for project in PROJECTS:
            await repo.create_project(project)
        for achievement in ACHIEVEMENTS:
            await repo.create_achievement(achievement)
        await repo.update_ai_config(AI_CONFIG)
        await session.commit()

    print(
        f"Seeded {len(SKILLS)} skills, {len(PROJECTS)} projects and "
        f"{len(ACHIEVEMENTS)} achievements."
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed demo portfolio content")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Seed even if skills or projects already exist",
    )
    args = parser.parse_args()
    return asyncio.run(seed(args.force))


if __name__ == "__main__":
    raise SystemExit(main())

"""Content repository: CRUD for every portfolio collection and singleton."""

from collections.abc import Sequence
from typing import Any, TypeVar

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.database import get_db
from portfolio_api.errors import NotFoundError
from portfolio_api.models._time import utcnow
from portfolio_api.models.ai_config import AiConfig
from portfolio_api.models.contact import ContactMessage
from portfolio_api.models.content import (
    SINGLETON_ID,
    Achievement,
    Introduction,
    Project,
    Skill,
    Socials,
)

ModelT = TypeVar("ModelT")

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ContentRepository:
    """
    Typed access to the portfolio tables.

    Singletons (introduction, socials, AI config) live in one row pinned to
    ``SINGLETON_ID`` and are written with a single INSERT ... ON CONFLICT
    statement, so concurrent updates never create a second row. Collections
    (skills, projects, achievements) support list/create/update/delete;
    contact messages are list/create/mark-read only.

    The repository flushes but does not commit; the request-scoped session
    from ``get_db`` commits when the request succeeds.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Singletons ---

    async def get_introduction(self) -> Introduction | None:
        return await self.db.get(Introduction, SINGLETON_ID)

    async def update_introduction(self, data: dict[str, Any]) -> Introduction:
        return await self._upsert_singleton(Introduction, data)

    async def get_socials(self) -> Socials | None:
        return await self.db.get(Socials, SINGLETON_ID)

    async def update_socials(self, data: dict[str, Any]) -> Socials:
        return await self._upsert_singleton(Socials, data)

    async def get_ai_config(self) -> AiConfig | None:
        return await self.db.get(AiConfig, SINGLETON_ID)

    async def update_ai_config(self, data: dict[str, Any]) -> AiConfig:
        return await self._upsert_singleton(AiConfig, data)

    async def _upsert_singleton(self, model: type[ModelT], data: dict[str, Any]) -> ModelT:
        """Insert the singleton row from ``data`` or merge ``data`` onto it."""
        dialect = self.db.get_bind().dialect.name
        try:
            insert = _DIALECT_INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Singleton upsert not supported on {dialect}")

        now = utcnow()
        stmt = insert(model).values(id=SINGLETON_ID, **data, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={**data, "updated_at": now},
        ).returning(model)

        result = await self.db.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()

    # --- Skills ---

    async def list_skills(self) -> Sequence[Skill]:
        result = await self.db.scalars(
            select(Skill).order_by(Skill.order.asc(), Skill.category.asc(), Skill.id.asc())
        )
        return result.all()

    async def create_skill(self, data: dict[str, Any]) -> Skill:
        return await self._create(Skill(**data))

    async def update_skill(self, skill_id: int, data: dict[str, Any]) -> Skill:
        return await self._update(Skill, "Skill", skill_id, data)

    async def delete_skill(self, skill_id: int) -> None:
        await self._delete(Skill, skill_id)

    # --- Projects ---

    async def list_projects(self) -> Sequence[Project]:
        result = await self.db.scalars(
            select(Project).order_by(Project.order.asc(), Project.created_at.desc())
        )
        return result.all()

    async def create_project(self, data: dict[str, Any]) -> Project:
        return await self._create(Project(**data))

    async def update_project(self, project_id: int, data: dict[str, Any]) -> Project:
        return await self._update(Project, "Project", project_id, data)

    async def delete_project(self, project_id: int) -> None:
        await self._delete(Project, project_id)

    # --- Achievements ---

    async def list_achievements(self) -> Sequence[Achievement]:
        result = await self.db.scalars(
            select(Achievement).order_by(Achievement.order.asc(), Achievement.created_at.desc())
        )
        return result.all()

    async def create_achievement(self, data: dict[str, Any]) -> Achievement:
        return await self._create(Achievement(**data))

    async def update_achievement(self, achievement_id: int, data: dict[str, Any]) -> Achievement:
        return await self._update(Achievement, "Achievement", achievement_id, data)

    async def delete_achievement(self, achievement_id: int) -> None:
        await self._delete(Achievement, achievement_id)

    # --- Contact messages ---

    async def list_contact_messages(self) -> Sequence[ContactMessage]:
        result = await self.db.scalars(
            select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        )
        return result.all()

    async def create_contact_message(
        self, name: str, email: str, subject: str, message: str
    ) -> ContactMessage:
        """Store a submission. Read state and timestamp are always server-assigned."""
        return await self._create(
            ContactMessage(
                name=name,
                email=email,
                subject=subject,
                message=message,
                is_read=False,
                created_at=utcnow(),
            )
        )

    async def mark_message_read(self, message_id: int) -> ContactMessage:
        return await self._update(ContactMessage, "Contact message", message_id, {"is_read": True})

    # --- Helpers ---

    async def _create(self, row: ModelT) -> ModelT:
        self.db.add(row)
        await self.db.flush()
        return row

    async def _update(
        self, model: type[ModelT], resource: str, row_id: int, data: dict[str, Any]
    ) -> ModelT:
        row = await self.db.get(model, row_id)
        if row is None:
            raise NotFoundError(resource, row_id)
        for key, value in data.items():
            setattr(row, key, value)
        await self.db.flush()
        return row

    async def _delete(self, model: type, row_id: int) -> None:
        # Deleting an unknown id is not an error
        await self.db.execute(delete(model).where(model.id == row_id))


async def get_repository(db: AsyncSession = Depends(get_db)) -> ContentRepository:
    """Dependency providing a content repository bound to the request session."""
    return ContentRepository(db)

"""Direct tests for ContentRepository."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.errors import NotFoundError
from portfolio_api.models import ContactMessage, Introduction
from portfolio_api.models.ai_config import DEFAULT_SYSTEM_PROMPT
from portfolio_api.models.content import SINGLETON_ID
from portfolio_api.repository.content import ContentRepository


@pytest.fixture
def repo(db_session: AsyncSession) -> ContentRepository:
    return ContentRepository(db_session)


class TestSingletonUpsert:
    async def test_get_before_write_is_none(self, repo: ContentRepository):
        assert await repo.get_introduction() is None
        assert await repo.get_socials() is None
        assert await repo.get_ai_config() is None

    async def test_upsert_pins_row_id(self, repo: ContentRepository, db_session: AsyncSession):
        first = await repo.update_introduction({"name": "A"})
        second = await repo.update_introduction({"role": "B"})

        assert first.id == second.id == SINGLETON_ID
        assert second.name == "A"
        assert second.role == "B"
        count = await db_session.scalar(select(func.count()).select_from(Introduction))
        assert count == 1

    async def test_upsert_stamps_updated_at(self, repo: ContentRepository):
        first = await repo.update_socials({"github": "g"})
        first_stamp = first.updated_at
        second = await repo.update_socials({"github": "h"})
        assert second.updated_at >= first_stamp

    async def test_ai_config_defaults_on_insert(self, repo: ContentRepository):
        config = await repo.update_ai_config({"api_key": "k"})
        assert config.enabled is True
        assert config.system_prompt == DEFAULT_SYSTEM_PROMPT


class TestCollections:
    async def test_update_missing_raises_not_found(self, repo: ContentRepository):
        with pytest.raises(NotFoundError):
            await repo.update_skill(1, {"name": "x"})
        with pytest.raises(NotFoundError):
            await repo.update_project(1, {"title": "x"})
        with pytest.raises(NotFoundError):
            await repo.update_achievement(1, {"title": "x"})

    async def test_delete_missing_is_noop(self, repo: ContentRepository):
        await repo.delete_skill(1)
        await repo.delete_project(1)
        await repo.delete_achievement(1)

    async def test_update_only_touches_given_fields(self, repo: ContentRepository):
        skill = await repo.create_skill(
            {"name": "Rust", "category": "backend", "proficiency": 40, "order": 2}
        )
        updated = await repo.update_skill(skill.id, {"proficiency": 60})
        assert updated.proficiency == 60
        assert updated.order == 2
        assert updated.name == "Rust"

    async def test_create_assigns_id_and_timestamp(self, repo: ContentRepository):
        achievement = await repo.create_achievement(
            {"title": "Hackathon", "issuer": "MLH", "date": "2021"}
        )
        assert achievement.id is not None
        assert achievement.created_at is not None
        assert achievement.icon_type == "trophy"


class TestContactMessages:
    async def test_create_is_unread(self, repo: ContentRepository):
        message = await repo.create_contact_message(
            name="N", email="n@example.com", subject="S", message="M"
        )
        assert message.is_read is False
        assert message.created_at is not None

    async def test_mark_read(self, repo: ContentRepository, db_session: AsyncSession):
        message = await repo.create_contact_message(
            name="N", email="n@example.com", subject="S", message="M"
        )
        await repo.mark_message_read(message.id)
        stored = await db_session.get(ContactMessage, message.id)
        assert stored.is_read is True
        assert stored.message == "M"

    async def test_mark_read_missing_raises(self, repo: ContentRepository):
        with pytest.raises(NotFoundError):
            await repo.mark_message_read(99)

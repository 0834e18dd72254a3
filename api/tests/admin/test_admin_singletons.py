"""Tests for the singleton admin endpoints: introduction, socials, AI config."""

import json

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.models import AiConfig, Introduction, Socials


async def _row_count(db_session: AsyncSession, model) -> int:
    return await db_session.scalar(select(func.count()).select_from(model))


class TestIntroduction:
    async def test_first_update_creates_row(
        self, async_client: AsyncClient, admin_headers: dict, db_session: AsyncSession
    ):
        response = await async_client.put(
            "/api/admin/introduction",
            json={"name": "Alex", "role": "Engineer", "bio": "Hello"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["id"] == 1
        assert await _row_count(db_session, Introduction) == 1

    async def test_repeated_updates_keep_one_row(
        self, async_client: AsyncClient, admin_headers: dict, db_session: AsyncSession
    ):
        await async_client.put(
            "/api/admin/introduction",
            json={"name": "Alex", "role": "Engineer", "bio": "Hello"},
            headers=admin_headers,
        )
        response = await async_client.put(
            "/api/admin/introduction",
            json={"bio": "Updated bio", "location": "Berlin"},
            headers=admin_headers,
        )

        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Alex"
        assert data["bio"] == "Updated bio"
        assert data["location"] == "Berlin"
        assert await _row_count(db_session, Introduction) == 1

    async def test_public_read_reflects_update(
        self, async_client: AsyncClient, admin_headers: dict
    ):
        await async_client.put(
            "/api/admin/introduction",
            json={"name": "Alex", "detailedBio": "Long story"},
            headers=admin_headers,
        )
        data = (await async_client.get("/api/introduction")).json()
        assert data["name"] == "Alex"
        assert data["detailedBio"] == "Long story"
        assert data["role"] == ""

    async def test_null_name_rejected(self, async_client: AsyncClient, admin_headers: dict):
        response = await async_client.put(
            "/api/admin/introduction", json={"name": None}, headers=admin_headers
        )
        assert response.status_code == 422


class TestSocials:
    async def test_update_socials(
        self, async_client: AsyncClient, admin_headers: dict, db_session: AsyncSession
    ):
        await async_client.put(
            "/api/admin/socials",
            json={"github": "https://github.com/alex"},
            headers=admin_headers,
        )
        response = await async_client.put(
            "/api/admin/socials",
            json={"linkedin": "https://linkedin.com/in/alex"},
            headers=admin_headers,
        )
        data = response.json()
        assert data["github"] == "https://github.com/alex"
        assert data["linkedin"] == "https://linkedin.com/in/alex"
        assert data["twitter"] is None
        assert await _row_count(db_session, Socials) == 1

    async def test_clearing_a_link(self, async_client: AsyncClient, admin_headers: dict):
        await async_client.put(
            "/api/admin/socials", json={"twitter": "https://x.com/alex"}, headers=admin_headers
        )
        response = await async_client.put(
            "/api/admin/socials", json={"twitter": None}, headers=admin_headers
        )
        assert response.json()["twitter"] is None


class TestAiConfig:
    async def test_get_before_save_is_empty(
        self, async_client: AsyncClient, admin_headers: dict
    ):
        response = await async_client.get("/api/admin/ai-config", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {}

    async def test_api_key_is_never_returned(
        self, async_client: AsyncClient, admin_headers: dict, db_session: AsyncSession
    ):
        response = await async_client.put(
            "/api/admin/ai-config",
            json={"systemPrompt": "Be brief.", "apiKey": "super-secret"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert "super-secret" not in response.text
        assert response.json()["hasApiKey"] is True
        assert response.json()["enabled"] is True

        fetched = await async_client.get("/api/admin/ai-config", headers=admin_headers)
        assert "apiKey" not in fetched.json()
        assert fetched.json()["systemPrompt"] == "Be brief."

        stored = await db_session.get(AiConfig, 1)
        assert stored.api_key == "super-secret"

    async def test_disable_keeps_prompt(
        self, async_client: AsyncClient, admin_headers: dict, db_session: AsyncSession
    ):
        await async_client.put(
            "/api/admin/ai-config", json={"systemPrompt": "Be brief."}, headers=admin_headers
        )
        response = await async_client.put(
            "/api/admin/ai-config", json={"enabled": False}, headers=admin_headers
        )
        data = response.json()
        assert data["enabled"] is False
        assert data["systemPrompt"] == "Be brief."
        assert data["hasApiKey"] is False
        assert await _row_count(db_session, AiConfig) == 1


class TestAnalyzeSection:
    async def test_analyze_uses_analysis_model(
        self, async_client: AsyncClient, admin_headers: dict, gemini
    ):
        response = await async_client.post(
            "/api/admin/ai/analyze",
            json={"section": "skills", "content": [{"name": "Python", "proficiency": 90}]},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"response": "Your portfolio looks great."}

        request = gemini.requests[0]
        assert request.url.path.endswith("/models/gemini-2.5-pro:generateContent")
        prompt = json.loads(request.content)["contents"][0]["parts"][0]["text"]
        assert prompt.startswith("Analyze this skills section")
        assert '"Python"' in prompt

    async def test_analyze_provider_failure_returns_500(
        self, async_client: AsyncClient, admin_headers: dict, gemini
    ):
        gemini.status_code = 500
        response = await async_client.post(
            "/api/admin/ai/analyze",
            json={"section": "projects", "content": {}},
            headers=admin_headers,
        )
        assert response.status_code == 500
        assert response.json()["detail"]["error"]["code"] == "AI_ERROR"

"""Admin router for portfolio content management.

Every route here sits behind ``require_admin``, attached at router level so
no endpoint can be added without it.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, File, UploadFile, status

from portfolio_api.auth.dependencies import require_admin
from portfolio_api.config import Settings, get_settings
from portfolio_api.errors import IntegrationError, NotFoundError, api_error
from portfolio_api.models.ai_config import AiConfig
from portfolio_api.repository.content import ContentRepository, get_repository
from portfolio_api.schemas.ai import (
    AiConfigResponse,
    AiConfigUpdate,
    AnalyzeSectionRequest,
    ChatResponse,
)
from portfolio_api.schemas.base import MessageResponse
from portfolio_api.schemas.contact import ContactMessageResponse
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
from portfolio_api.services.ai import PortfolioAssistant, get_assistant
from portfolio_api.services.uploads import save_image, save_resume

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


def _not_found(exc: NotFoundError):
    return api_error(status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))


# --- Singletons ---


@router.put("/introduction", response_model=IntroductionResponse)
async def update_introduction(
    data: IntroductionUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> IntroductionResponse:
    """Create the introduction on first save, otherwise merge the given fields."""
    intro = await repo.update_introduction(data.changes())
    return IntroductionResponse.model_validate(intro)


@router.put("/socials", response_model=SocialsResponse)
async def update_socials(
    data: SocialsUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> SocialsResponse:
    socials = await repo.update_socials(data.changes())
    return SocialsResponse.model_validate(socials)


def _ai_config_response(config: AiConfig) -> AiConfigResponse:
    return AiConfigResponse(
        id=config.id,
        system_prompt=config.system_prompt,
        enabled=bool(config.enabled),
        has_api_key=bool(config.api_key),
        updated_at=config.updated_at,
    )


@router.get("/ai-config")
async def get_ai_config(
    repo: ContentRepository = Depends(get_repository),
) -> dict[str, Any]:
    """Stored assistant configuration, or an empty object if none is saved."""
    config = await repo.get_ai_config()
    if config is None:
        return {}
    return _ai_config_response(config).model_dump(mode="json", by_alias=True)


@router.put("/ai-config", response_model=AiConfigResponse)
async def update_ai_config(
    data: AiConfigUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> AiConfigResponse:
    config = await repo.update_ai_config(data.changes())
    return _ai_config_response(config)


@router.post("/ai/analyze", response_model=ChatResponse)
async def analyze_section(
    data: AnalyzeSectionRequest,
    repo: ContentRepository = Depends(get_repository),
    assistant: PortfolioAssistant = Depends(get_assistant),
) -> ChatResponse:
    """Ask the assistant to review one portfolio section."""
    ai_config = await repo.get_ai_config()
    try:
        reply = await assistant.analyze_section(data.section, data.content, ai_config)
    except IntegrationError:
        logger.exception("Portfolio analysis failed for section %s", data.section)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "AI_ERROR", "Failed to analyze portfolio section"
        )
    return ChatResponse(response=reply)


# --- Skills ---


@router.post("/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    data: SkillCreate,
    repo: ContentRepository = Depends(get_repository),
) -> SkillResponse:
    skill = await repo.create_skill(data.model_dump())
    return SkillResponse.model_validate(skill)


@router.put("/skills/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: int,
    data: SkillUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> SkillResponse:
    try:
        skill = await repo.update_skill(skill_id, data.changes())
    except NotFoundError as exc:
        raise _not_found(exc)
    return SkillResponse.model_validate(skill)


@router.delete("/skills/{skill_id}", response_model=MessageResponse)
async def delete_skill(
    skill_id: int,
    repo: ContentRepository = Depends(get_repository),
) -> MessageResponse:
    await repo.delete_skill(skill_id)
    return MessageResponse(message="Skill deleted successfully")


# --- Projects ---


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    repo: ContentRepository = Depends(get_repository),
) -> ProjectResponse:
    project = await repo.create_project(data.model_dump())
    return ProjectResponse.model_validate(project)


@router.put("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> ProjectResponse:
    try:
        project = await repo.update_project(project_id, data.changes())
    except NotFoundError as exc:
        raise _not_found(exc)
    return ProjectResponse.model_validate(project)


@router.delete("/projects/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    repo: ContentRepository = Depends(get_repository),
) -> MessageResponse:
    await repo.delete_project(project_id)
    return MessageResponse(message="Project deleted successfully")


# --- Achievements ---


@router.post(
    "/achievements", response_model=AchievementResponse, status_code=status.HTTP_201_CREATED
)
async def create_achievement(
    data: AchievementCreate,
    repo: ContentRepository = Depends(get_repository),
) -> AchievementResponse:
    achievement = await repo.create_achievement(data.model_dump())
    return AchievementResponse.model_validate(achievement)


@router.put("/achievements/{achievement_id}", response_model=AchievementResponse)
async def update_achievement(
    achievement_id: int,
    data: AchievementUpdate,
    repo: ContentRepository = Depends(get_repository),
) -> AchievementResponse:
    try:
        achievement = await repo.update_achievement(achievement_id, data.changes())
    except NotFoundError as exc:
        raise _not_found(exc)
    return AchievementResponse.model_validate(achievement)


@router.delete("/achievements/{achievement_id}", response_model=MessageResponse)
async def delete_achievement(
    achievement_id: int,
    repo: ContentRepository = Depends(get_repository),
) -> MessageResponse:
    await repo.delete_achievement(achievement_id)
    return MessageResponse(message="Achievement deleted successfully")


# --- Contact messages ---


@router.get("/contact-messages", response_model=list[ContactMessageResponse])
async def list_contact_messages(
    repo: ContentRepository = Depends(get_repository),
) -> list[ContactMessageResponse]:
    """All contact submissions, newest first."""
    return [ContactMessageResponse.model_validate(m) for m in await repo.list_contact_messages()]


@router.put("/contact-messages/{message_id}/read", response_model=ContactMessageResponse)
async def mark_message_read(
    message_id: int,
    repo: ContentRepository = Depends(get_repository),
) -> ContactMessageResponse:
    try:
        message = await repo.mark_message_read(message_id)
    except NotFoundError as exc:
        raise _not_found(exc)
    return ContactMessageResponse.model_validate(message)


# --- Uploads ---


@router.post("/upload", response_model=ImageUploadResponse)
async def upload_image(
    image: UploadFile = File(...),
    config: Settings = Depends(get_settings),
) -> ImageUploadResponse:
    """Upload a jpeg/png/gif image (5 MB max) and return its public URL."""
    image_url = await save_image(image, config)
    return ImageUploadResponse(image_url=image_url)


@router.post("/upload-resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: UploadFile = File(...),
    config: Settings = Depends(get_settings),
) -> ResumeUploadResponse:
    """Replace the downloadable resume. Only ``application/pdf`` is accepted."""
    url = await save_resume(resume, config)
    return ResumeUploadResponse(message="Resume uploaded successfully", url=url)

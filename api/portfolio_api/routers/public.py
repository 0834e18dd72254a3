"""Public portfolio endpoints: content reads, contact form and chat."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.database import get_db
from portfolio_api.errors import IntegrationError, api_error
from portfolio_api.repository.content import ContentRepository, get_repository
from portfolio_api.schemas.ai import ChatRequest, ChatResponse
from portfolio_api.schemas.contact import ContactMessageCreate, ContactSubmitResponse
from portfolio_api.schemas.content import (
    AchievementResponse,
    IntroductionResponse,
    ProjectResponse,
    SkillResponse,
    SocialsResponse,
)
from portfolio_api.services.ai import PortfolioAssistant, get_assistant
from portfolio_api.services.email import EmailSender, get_email_sender

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Portfolio"])


@router.get("/introduction")
async def get_introduction(
    repo: ContentRepository = Depends(get_repository),
) -> dict[str, Any]:
    """Site introduction, or an empty object before one has been saved."""
    intro = await repo.get_introduction()
    if intro is None:
        return {}
    return IntroductionResponse.model_validate(intro).model_dump(mode="json", by_alias=True)


@router.get("/socials")
async def get_socials(
    repo: ContentRepository = Depends(get_repository),
) -> dict[str, Any]:
    """Social links, or an empty object before they have been saved."""
    socials = await repo.get_socials()
    if socials is None:
        return {}
    return SocialsResponse.model_validate(socials).model_dump(mode="json", by_alias=True)


@router.get("/skills", response_model=list[SkillResponse])
async def list_skills(
    repo: ContentRepository = Depends(get_repository),
) -> list[SkillResponse]:
    """Skills ordered by ``order``, then category."""
    return [SkillResponse.model_validate(s) for s in await repo.list_skills()]


@router.get("/projects", response_model=list[ProjectResponse])
async def list_projects(
    repo: ContentRepository = Depends(get_repository),
) -> list[ProjectResponse]:
    return [ProjectResponse.model_validate(p) for p in await repo.list_projects()]


@router.get("/achievements", response_model=list[AchievementResponse])
async def list_achievements(
    repo: ContentRepository = Depends(get_repository),
) -> list[AchievementResponse]:
    return [AchievementResponse.model_validate(a) for a in await repo.list_achievements()]


@router.post(
    "/contact",
    response_model=ContactSubmitResponse,
    status_code=status.HTTP_200_OK,
)
async def submit_contact(
    data: ContactMessageCreate,
    db: AsyncSession = Depends(get_db),
    repo: ContentRepository = Depends(get_repository),
    mailer: EmailSender = Depends(get_email_sender),
) -> ContactSubmitResponse:
    """
    Store a contact form submission and notify the site owner.

    Email delivery is best effort: the message is stored and acknowledged
    even if the notification or the auto-reply fails.
    """
    message = await repo.create_contact_message(
        name=data.name,
        email=data.email,
        subject=data.subject,
        message=data.message,
    )
    # Commit before sending so a slow SMTP server cannot lose the message
    await db.commit()

    fields = data.model_dump(include={"name", "email", "subject", "message"})
    try:
        await mailer.send_contact_notification(**fields)
    except IntegrationError:
        logger.exception("Contact notification failed for message id=%s", message.id)
    try:
        await mailer.send_auto_reply(**fields)
    except IntegrationError:
        logger.exception("Auto-reply failed for message id=%s", message.id)

    return ContactSubmitResponse(message="Message sent successfully", id=message.id)


@router.post(
    "/ai/chat",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
)
async def chat(
    data: ChatRequest,
    repo: ContentRepository = Depends(get_repository),
    assistant: PortfolioAssistant = Depends(get_assistant),
) -> ChatResponse:
    """Answer a visitor's question with the configured AI assistant."""
    ai_config = await repo.get_ai_config()
    if ai_config is not None and not ai_config.enabled:
        raise api_error(
            status.HTTP_503_SERVICE_UNAVAILABLE, "AI_DISABLED", "AI assistant is disabled"
        )

    try:
        reply = await assistant.chat(data.message, data.context, ai_config)
    except IntegrationError:
        logger.exception("AI chat failed")
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "AI_ERROR", "Failed to generate AI response"
        )

    return ChatResponse(response=reply)

"""Chat assistant configuration (singleton)."""

from sqlalchemy import TIMESTAMP, Boolean, Column, Integer, Text, text

from portfolio_api.database import Base
from portfolio_api.models._time import utcnow

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that provides feedback on portfolios and career advice."
)


class AiConfig(Base):
    __tablename__ = "ai_config"

    id = Column(Integer, primary_key=True, autoincrement=False)
    system_prompt = Column(Text, default=DEFAULT_SYSTEM_PROMPT)
    api_key = Column(Text)
    enabled = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow)

"""User model (the credential store)."""

from sqlalchemy import TIMESTAMP, Boolean, Column, Integer, String, Text, text

from portfolio_api.database import Base
from portfolio_api.models._time import utcnow


class User(Base):
    """Dashboard account. Only ``is_admin`` users may use the admin API."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

"""Contact form submissions."""

from sqlalchemy import TIMESTAMP, Boolean, Column, Index, Integer, Text, text

from portfolio_api.database import Base
from portfolio_api.models._time import utcnow


class ContactMessage(Base):
    """A message left through the public contact form.

    ``is_read`` and ``created_at`` are owned by the server and never taken
    from the submitted payload.
    """

    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    __table_args__ = (Index("idx_contact_messages_created", created_at.desc()),)

"""Services for the Portfolio API."""

from portfolio_api.services.ai import GeminiClient, PortfolioAssistant, get_assistant
from portfolio_api.services.email import EmailSender, get_email_sender

__all__ = [
    "EmailSender",
    "get_email_sender",
    "GeminiClient",
    "PortfolioAssistant",
    "get_assistant",
]

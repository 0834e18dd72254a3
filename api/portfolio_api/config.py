"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SECRETS = {
    "your-secret-key-change-in-production",
    "dev-jwt-secret-change-in-production",
    "changeme",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``DATABASE_URL`` and ``JWT_SECRET`` have no defaults: constructing
    settings without them fails, which stops the API before it serves a
    request.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str
    test_database_url: str = "sqlite+aiosqlite:///./portfolio_test.db"

    # Token signing
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = 24

    environment: str = "development"
    log_level: str = "INFO"
    port: int = 5000

    # CORS
    cors_origins: str = "http://localhost:5000,http://localhost:5173"

    # SMTP
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = True
    smtp_timeout_seconds: float = 10.0
    contact_recipient: str | None = None
    site_owner_name: str = "Portfolio Owner"

    # Gemini
    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_model: str = "gemini-2.5-flash"
    gemini_analysis_model: str = "gemini-2.5-pro"
    gemini_timeout_seconds: float = 60.0

    # Uploads
    upload_dir: str = "uploads"
    resume_path: str = "client/public/resume.pdf"
    max_upload_bytes: int = 5 * 1024 * 1024

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins, filtering empty strings."""
        if not self.cors_origins:
            return ["http://localhost:5000"]
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins if origins else ["http://localhost:5000"]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in {"production", "prod"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


def validate_security_settings(config: Settings | None = None) -> None:
    """Refuse to start with an unusable token secret."""
    config = config or settings
    if not config.jwt_secret.strip():
        raise RuntimeError("JWT_SECRET is empty. Set a signing secret before starting the API.")

    if not config.is_production:
        return

    if config.jwt_secret in PLACEHOLDER_SECRETS or len(config.jwt_secret) < 32:
        raise RuntimeError(
            "Insecure JWT_SECRET configured for production. "
            "Set a strong value (32+ characters) in the environment before starting the API."
        )

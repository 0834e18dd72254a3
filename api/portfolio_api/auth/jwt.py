"""Bearer token issuance and verification."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import JWTError, jwt

from portfolio_api.config import Settings, get_settings


class InvalidTokenError(Exception):
    """Raised for any token that fails verification.

    Bad signatures, expired tokens and malformed payloads all map to this one
    error so callers cannot tell them apart.
    """


@dataclass(frozen=True)
class AuthIdentity:
    """Identity carried by a token and attached to authenticated requests."""

    id: int
    email: str
    is_admin: bool


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_hours: int = 24):
        if not secret:
            raise ValueError("Token signing secret is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self.expires_in = timedelta(hours=expires_hours)

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenService":
        return cls(
            secret=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            expires_hours=config.access_token_expire_hours,
        )

    def issue(self, identity: AuthIdentity) -> str:
        """Create a token for ``identity`` that expires after ``expires_in``."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(identity.id),
            "id": identity.id,
            "email": identity.email,
            "isAdmin": identity.is_admin,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> AuthIdentity:
        """
        Decode and validate a token.

        Returns the embedded identity. Raises InvalidTokenError if the
        signature does not match, the token has expired, or the claims are
        incomplete.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc

        try:
            return AuthIdentity(
                id=int(payload["id"]),
                email=str(payload["email"]),
                is_admin=bool(payload.get("isAdmin", False)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError("Invalid token") from exc


@lru_cache
def get_token_service() -> TokenService:
    """Dependency providing the token service built from application settings."""
    return TokenService.from_settings(get_settings())

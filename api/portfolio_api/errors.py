"""Error types and the JSON error envelope returned to clients."""

from fastapi import HTTPException


class NotFoundError(Exception):
    """Raised by the content repository when a row to modify does not exist."""

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")


class IntegrationError(Exception):
    """Raised when an outbound integration (email, AI provider) fails."""


def api_error(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> HTTPException:
    """Build an HTTPException using the API's error envelope."""
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
            }
        },
        headers=headers,
    )

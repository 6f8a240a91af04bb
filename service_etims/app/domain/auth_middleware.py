"""
Bearer token gate for the eTIMS HTTP front-end.

Only the presence and shape of the header are checked; the token is not
verified against the remote service.
"""

from fastapi import Request

from shared.errors import AuthenticationError
from shared.logging import get_logger

logger = get_logger("etims.auth_middleware")


async def require_auth(request: Request) -> str:
    """FastAPI dependency returning the caller's bearer token."""
    auth_header = request.headers.get("Authorization")

    if not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("Authentication middleware error", path=request.url.path, error="missing bearer token")
        raise AuthenticationError("Authentication required")

    token = auth_header[7:].strip()  # Remove "Bearer " prefix
    if not token:
        logger.warning("Authentication middleware error", path=request.url.path, error="empty bearer token")
        raise AuthenticationError("Invalid authentication token")

    request.state.token = token
    return token

"""
Authentication service: exchanges credentials for a remote access token.
"""

from typing import Any, Dict

from ..adapters.api_client import Credentials
from ..validation import validate
from .base import ResourceService


class AuthService(ResourceService):

    component = "auth"

    async def get_token(self, credentials: Any) -> Dict[str, Any]:
        """Validate credentials and fetch a token with them.

        Once a token is issued the client keeps the credentials for every
        later lazy refresh; a rejected set leaves the previous ones in place.
        """
        try:
            validated = validate(credentials, "auth")

            token = await self.client.authenticate(Credentials(validated["username"], validated["password"]))

            return {
                "success": True,
                "data": {
                    "access_token": token,
                    "expires_at": self.client.token_expires_at.isoformat(),
                }
            }
        except Exception as e:
            self.logger.error("Authentication error", error=str(e))
            raise

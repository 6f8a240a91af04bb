"""
Common forwarding logic shared by the resource services.
"""

from typing import Any, Dict, Optional

from shared.logging import get_logger

from ..adapters.api_client import EtimsApiClient
from ..validation import validate


class ResourceService:
    """Validates a payload and forwards it to one remote endpoint."""

    component = "resource"

    def __init__(self, client: EtimsApiClient):
        self.client = client
        self.logger = get_logger(f"etims.{self.component}")

    @staticmethod
    def taxpayer_headers(validated: Dict[str, Any], raw: Dict[str, Any]) -> Dict[str, Optional[str]]:
        """Headers identifying the taxpayer branch (and device key, if any)."""
        return {
            "tin": validated["tin"],
            "bhfId": validated["bhfId"],
            "cmcKey": raw.get("cmcKey"),
        }

    async def _forward(
        self,
        action: str,
        endpoint: str,
        data: Any,
        schema: str,
        with_taxpayer_headers: bool = True,
    ) -> Dict[str, Any]:
        try:
            self.logger.info(action)
            validated = validate(data, schema)

            headers = self.taxpayer_headers(validated, data) if with_taxpayer_headers else None
            response = await self.client.post(endpoint, validated, headers)

            return {
                "success": True,
                "data": response
            }
        except Exception as e:
            self.logger.error(f"{action} failed", error=str(e))
            raise

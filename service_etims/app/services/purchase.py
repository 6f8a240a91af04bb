"""
Purchase transaction retrieval.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class PurchaseService(ResourceService):

    component = "purchase"

    async def select_purchase_trns(self, data: Any) -> Dict[str, Any]:
        """Purchases reported by suppliers since ``lastReqDt``."""
        return await self._forward(
            "Getting purchase transaction information", endpoints.SELECT_PURCHASE_TRNS, data, "purchase_trns"
        )

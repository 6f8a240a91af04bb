"""
Sales transaction submission and retrieval.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class SalesService(ResourceService):

    component = "sales"

    async def send_sales_trns(self, data: Any) -> Dict[str, Any]:
        """Submit a sales invoice with its line items."""
        return await self._forward(
            "Sending sales transaction information", endpoints.SEND_SALES_TRNS, data, "sales_trns"
        )

    async def select_sales_trns(self, data: Any) -> Dict[str, Any]:
        """Sales transactions since ``lastReqDt``, optionally narrowed to one ``invcNo``."""
        return await self._forward(
            "Getting sales transaction information", endpoints.SELECT_SALES_TRNS, data, "select_sales_trns"
        )

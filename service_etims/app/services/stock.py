"""
Stock movement and stock master management.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class StockService(ResourceService):

    component = "stock"

    async def select_move_list(self, data: Any) -> Dict[str, Any]:
        """Stock movements since ``lastReqDt``."""
        return await self._forward("Getting move list", endpoints.SELECT_MOVE_LIST, data, "move_list")

    async def save_stock_master(self, data: Any) -> Dict[str, Any]:
        """Record the current stock level of an item."""
        return await self._forward("Saving stock master", endpoints.SAVE_STOCK_MASTER, data, "stock_master")

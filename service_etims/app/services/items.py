"""
Item master management.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class ItemService(ResourceService):

    component = "items"

    async def save_item(self, data: Any) -> Dict[str, Any]:
        """Register or update an item in the branch item master."""
        return await self._forward("Saving item", endpoints.SAVE_ITEM, data, "save_item")

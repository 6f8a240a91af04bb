"""
Imported item lookups.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class ImportService(ResourceService):

    component = "imports"

    async def select_import_item_list(self, data: Any) -> Dict[str, Any]:
        """Customs-declared import items awaiting confirmation."""
        return await self._forward(
            "Getting import item list", endpoints.SELECT_IMPORT_ITEM_LIST, data, "import_item_list"
        )

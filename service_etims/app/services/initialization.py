"""
OSCU device initialization.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class InitializationService(ResourceService):

    component = "initialization"

    async def select_init_osdc_info(self, data: Any) -> Dict[str, Any]:
        """Register a device (``dvcSrlNo``) against a taxpayer branch."""
        return await self._forward(
            "Initializing OSDC Info",
            endpoints.SELECT_INIT_OSDC_INFO,
            data,
            "initialization",
            with_taxpayer_headers=False,
        )

"""
Basic data lookups: codes, item classifications, branches, notices,
taxpayer and customer information.
"""

from typing import Any, Dict

from .. import endpoints
from .base import ResourceService


class BasicDataService(ResourceService):

    component = "basic_data"

    async def select_code_list(self, data: Any) -> Dict[str, Any]:
        """Code tables (tax types, units, countries...) changed since ``lastReqDt``."""
        return await self._forward("Getting code list", endpoints.SELECT_CODE_LIST, data, "code_list")

    async def select_item_cls_list(self, data: Any) -> Dict[str, Any]:
        """Item classification codes changed since ``lastReqDt``."""
        return await self._forward(
            "Getting item classification list", endpoints.SELECT_ITEM_CLS_LIST, data, "item_cls_list"
        )

    async def select_bhf_list(self, data: Any) -> Dict[str, Any]:
        """Branch list; only ``lastReqDt`` is required and no taxpayer headers are sent."""
        return await self._forward(
            "Getting branch list", endpoints.SELECT_BHF_LIST, data, "bhf_list", with_taxpayer_headers=False
        )

    async def select_notice_list(self, data: Any) -> Dict[str, Any]:
        """Notices published by KRA since ``lastReqDt``."""
        return await self._forward("Getting notice list", endpoints.SELECT_NOTICE_LIST, data, "notice_list")

    async def select_taxpayer_info(self, data: Any) -> Dict[str, Any]:
        """Registration details of the taxpayer branch."""
        return await self._forward("Getting taxpayer info", endpoints.SELECT_TAXPAYER_INFO, data, "taxpayer_info")

    async def select_customer_list(self, data: Any) -> Dict[str, Any]:
        """Customers registered against the branch."""
        return await self._forward("Getting customer list", endpoints.SELECT_CUSTOMER_LIST, data, "customer_list")

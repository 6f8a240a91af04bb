"""
HTTP front-end for the KRA eTIMS integration layer.
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Body, Depends

from shared.base_service import BaseService
from shared.config import EtimsSettings

from .adapters.api_client import EtimsApiClient
from .domain.auth_middleware import require_auth
from .sdk import EtimsSDK

# (path, service attribute, method name)
PROTECTED_ROUTES = [
    ("/initialization/osdc-info", "initialization", "select_init_osdc_info"),
    ("/basic-data/code-list", "basic_data", "select_code_list"),
    ("/basic-data/item-cls-list", "basic_data", "select_item_cls_list"),
    ("/basic-data/bhf-list", "basic_data", "select_bhf_list"),
    ("/basic-data/notice-list", "basic_data", "select_notice_list"),
    ("/basic-data/taxpayer-info", "basic_data", "select_taxpayer_info"),
    ("/basic-data/customer-list", "basic_data", "select_customer_list"),
    ("/items/save", "items", "save_item"),
    ("/sales/send", "sales", "send_sales_trns"),
    ("/sales/select", "sales", "select_sales_trns"),
    ("/stock/move-list", "stock", "select_move_list"),
    ("/stock/save-master", "stock", "save_stock_master"),
    ("/purchase/select", "purchase", "select_purchase_trns"),
    ("/imports/item-list", "imports", "select_import_item_list"),
]


class EtimsService(BaseService):
    """eTIMS gateway service implementation."""

    api_prefix = "/api"
    health_path = "/api/health"

    def __init__(self, settings: Optional[EtimsSettings] = None, sdk: Optional[EtimsSDK] = None):
        super().__init__("etims", settings)
        if sdk is None:
            client = EtimsApiClient.from_settings(self.config, metrics=self.metrics)
            sdk = EtimsSDK(self.config, client)
        self.sdk = sdk

        self._setup_etims_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.etims_service = self

    def _setup_etims_routes(self):
        """Set up eTIMS-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "etims",
                "message": "KRA eTIMS integration layer",
                "version": "1.0.0"
            }

        @self.app.post(f"{self.api_prefix}/auth/token")
        async def get_token(payload: Dict[str, Any] = Body(...)):
            """Exchange API credentials for a remote access token."""
            self.logger.info("Getting authentication token")
            return await self.sdk.auth.get_token(payload)

        for path, service_name, method_name in PROTECTED_ROUTES:
            handler = getattr(getattr(self.sdk, service_name), method_name)
            self._add_protected_route(path, handler)

    def _add_protected_route(self, path: str, handler: Callable[[Any], Awaitable[Dict[str, Any]]]):
        async def endpoint(payload: Dict[str, Any] = Body(...)):
            return await handler(payload)

        endpoint.__name__ = handler.__name__
        endpoint.__doc__ = handler.__doc__
        self.app.post(
            f"{self.api_prefix}{path}",
            dependencies=[Depends(require_auth)],
        )(endpoint)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Report the remote token cache state without calling out."""
        return {
            "remote_token": "valid" if self.sdk.client.is_token_valid() else "absent",
        }


def create_app(settings: Optional[EtimsSettings] = None, sdk: Optional[EtimsSDK] = None):
    """Create FastAPI application."""
    service = EtimsService(settings, sdk)
    return service.app


def main():
    service = EtimsService()
    service.run()


if __name__ == "__main__":
    main()

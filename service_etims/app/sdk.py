"""
SDK facade bundling every resource service around one API client.
"""

from typing import Optional

from shared.config import EtimsSettings, get_settings

from .adapters.api_client import EtimsApiClient
from .services import (
    AuthService,
    BasicDataService,
    ImportService,
    InitializationService,
    ItemService,
    PurchaseService,
    SalesService,
    StockService,
)


class EtimsSDK:
    """Uniform interface to the KRA eTIMS API.

    One instance owns one token cache. Callers that need several credential
    sets at once create one SDK (or client) per credential set.

    Example:
        >>> sdk = EtimsSDK()
        >>> await sdk.auth.get_token({"username": "...", "password": "..."})
        >>> await sdk.basic_data.select_code_list(
        ...     {"tin": "P000000045R", "bhfId": "00", "lastReqDt": "20220101010101"}
        ... )
    """

    def __init__(self, settings: Optional[EtimsSettings] = None, client: Optional[EtimsApiClient] = None):
        self.settings = settings or get_settings()
        self.client = client or EtimsApiClient.from_settings(self.settings)

        self.auth = AuthService(self.client)
        self.initialization = InitializationService(self.client)
        self.basic_data = BasicDataService(self.client)
        self.items = ItemService(self.client)
        self.sales = SalesService(self.client)
        self.stock = StockService(self.client)
        self.purchase = PurchaseService(self.client)
        self.imports = ImportService(self.client)

"""
Resource services, one per remote capability.

Each service validates the caller's payload, forwards it through the shared
``EtimsApiClient`` and wraps the result as ``{"success": True, "data": ...}``.
Errors are logged and re-raised unchanged.
"""

from .auth import AuthService
from .basic_data import BasicDataService
from .imports import ImportService
from .initialization import InitializationService
from .items import ItemService
from .purchase import PurchaseService
from .sales import SalesService
from .stock import StockService

__all__ = [
    "AuthService",
    "BasicDataService",
    "ImportService",
    "InitializationService",
    "ItemService",
    "PurchaseService",
    "SalesService",
    "StockService",
]

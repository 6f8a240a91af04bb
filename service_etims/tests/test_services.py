"""
Unit tests for the resource services.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from service_etims.app import endpoints
from service_etims.app.adapters.api_client import Credentials
from service_etims.app.sdk import EtimsSDK
from service_etims.app.services import (
    AuthService,
    BasicDataService,
    ImportService,
    InitializationService,
    ItemService,
    PurchaseService,
    SalesService,
    StockService,
)
from shared.config import EtimsSettings
from shared.errors import ApiError, AuthenticationError, ValidationError
from shared.test_helpers import TestDataFactory

REMOTE_OK = {"resultCd": "0000", "resultMsg": "Successful", "data": {"items": []}}


@pytest.fixture
def mock_client():
    """Mock API client."""
    client = MagicMock()
    client.post = AsyncMock(return_value=REMOTE_OK)
    client.authenticate = AsyncMock(return_value="remote-token")
    client.token_expires_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
    return client


TAXPAYER_CASES = [
    (BasicDataService, "select_code_list", endpoints.SELECT_CODE_LIST, TestDataFactory.branch_query),
    (BasicDataService, "select_item_cls_list", endpoints.SELECT_ITEM_CLS_LIST, TestDataFactory.branch_query),
    (BasicDataService, "select_notice_list", endpoints.SELECT_NOTICE_LIST, TestDataFactory.branch_query),
    (BasicDataService, "select_taxpayer_info", endpoints.SELECT_TAXPAYER_INFO, TestDataFactory.branch_query),
    (BasicDataService, "select_customer_list", endpoints.SELECT_CUSTOMER_LIST, TestDataFactory.branch_query),
    (ItemService, "save_item", endpoints.SAVE_ITEM, TestDataFactory.item),
    (SalesService, "send_sales_trns", endpoints.SEND_SALES_TRNS, TestDataFactory.sales_transaction),
    (SalesService, "select_sales_trns", endpoints.SELECT_SALES_TRNS, TestDataFactory.branch_query),
    (StockService, "select_move_list", endpoints.SELECT_MOVE_LIST, TestDataFactory.branch_query),
    (StockService, "save_stock_master", endpoints.SAVE_STOCK_MASTER, TestDataFactory.stock_master),
    (PurchaseService, "select_purchase_trns", endpoints.SELECT_PURCHASE_TRNS, TestDataFactory.branch_query),
    (ImportService, "select_import_item_list", endpoints.SELECT_IMPORT_ITEM_LIST, TestDataFactory.branch_query),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("service_cls,method,endpoint,payload_factory", TAXPAYER_CASES)
async def test_taxpayer_scoped_operations(mock_client, service_cls, method, endpoint, payload_factory):
    """Each operation posts the cleaned payload with taxpayer headers."""
    payload = payload_factory(cmcKey="device-key")
    service = service_cls(mock_client)

    result = await getattr(service, method)(payload)

    assert result == {"success": True, "data": REMOTE_OK}
    mock_client.post.assert_awaited_once()
    called_endpoint, body, headers = mock_client.post.await_args.args
    assert called_endpoint == endpoint
    assert "cmcKey" not in body
    assert headers == {"tin": "P000000045R", "bhfId": "00", "cmcKey": "device-key"}


@pytest.mark.asyncio
async def test_cmc_key_is_optional(mock_client):
    await BasicDataService(mock_client).select_code_list(TestDataFactory.branch_query())

    headers = mock_client.post.await_args.args[2]
    assert headers["cmcKey"] is None


@pytest.mark.asyncio
async def test_initialization_sends_no_taxpayer_headers(mock_client):
    payload = {"tin": "P000000045R", "bhfId": "00", "dvcSrlNo": "MOVA22"}

    result = await InitializationService(mock_client).select_init_osdc_info(payload)

    assert result["success"] is True
    mock_client.post.assert_awaited_once_with(endpoints.SELECT_INIT_OSDC_INFO, payload, None)


@pytest.mark.asyncio
async def test_branch_list_sends_no_taxpayer_headers(mock_client):
    await BasicDataService(mock_client).select_bhf_list({"lastReqDt": "20220101010101"})

    mock_client.post.assert_awaited_once_with(
        endpoints.SELECT_BHF_LIST, {"lastReqDt": "20220101010101"}, None
    )


@pytest.mark.asyncio
async def test_validation_failure_makes_no_outbound_call(mock_client, sales_payload):
    del sales_payload["invcNo"]

    with pytest.raises(ValidationError):
        await SalesService(mock_client).send_sales_trns(sales_payload)

    mock_client.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_remote_errors_propagate(mock_client):
    mock_client.post = AsyncMock(side_effect=ApiError("Invalid TIN", 400, "9999"))

    with pytest.raises(ApiError) as exc_info:
        await PurchaseService(mock_client).select_purchase_trns(TestDataFactory.branch_query())

    assert exc_info.value.error_code == "9999"


@pytest.mark.asyncio
async def test_get_token_authenticates_with_new_credentials(mock_client):
    result = await AuthService(mock_client).get_token({"username": "user", "password": "secret"})

    mock_client.authenticate.assert_awaited_once_with(Credentials("user", "secret"))
    mock_client.set_credentials.assert_not_called()
    assert result == {
        "success": True,
        "data": {
            "access_token": "remote-token",
            "expires_at": "2030-01-01T00:00:00+00:00",
        },
    }


@pytest.mark.asyncio
async def test_get_token_validates_credentials(mock_client):
    with pytest.raises(ValidationError) as exc_info:
        await AuthService(mock_client).get_token({"username": "user"})

    assert [err["field"] for err in exc_info.value.errors] == ["password"]
    mock_client.authenticate.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_token_propagates_authentication_failure(mock_client):
    mock_client.authenticate = AsyncMock(side_effect=AuthenticationError("Failed to authenticate with KRA eTims API"))

    with pytest.raises(AuthenticationError):
        await AuthService(mock_client).get_token({"username": "user", "password": "secret"})


def test_sdk_shares_one_client_across_services():
    settings = EtimsSettings(env="development", api_username="user", api_password="secret")

    sdk = EtimsSDK(settings)

    assert sdk.client.credentials == Credentials("user", "secret")
    assert sdk.client.base_url == "https://etims-api-sbx.kra.go.ke"
    for service in (sdk.auth, sdk.initialization, sdk.basic_data, sdk.items,
                    sdk.sales, sdk.stock, sdk.purchase, sdk.imports):
        assert service.client is sdk.client


def test_sdk_uses_production_url_in_production():
    sdk = EtimsSDK(EtimsSettings(env="production", api_username=None, api_password=None))

    assert sdk.client.base_url == "https://etims-api.kra.go.ke/etims-api"
    assert sdk.client.credentials is None

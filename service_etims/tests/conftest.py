"""
Shared fixtures for eTIMS service tests.
"""

import pytest

from service_etims.app.adapters.api_client import Credentials, EtimsApiClient
from shared.test_helpers import FakeClock, FakeRemote, TestDataFactory

BASE_URL = "https://etims.test"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def credentials():
    return Credentials("etims-user", "etims-pass")


@pytest.fixture
def api_client(remote, clock, credentials):
    """Client wired to the fake remote with a controllable clock."""
    return EtimsApiClient(
        BASE_URL,
        credentials,
        transport=remote.transport(),
        clock=clock,
    )


@pytest.fixture
def sales_payload():
    return TestDataFactory.sales_transaction()

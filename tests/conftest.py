"""Test configuration for pytest."""

from __future__ import annotations

from typing import Dict, List, Tuple

import pytest

from osd_cloud.constants import JUMPROLE_ACCOUNT_ID_ENV
from tests.helpers import FakeClientFactory, FakeIdentityClient


@pytest.fixture
def calls() -> List[Tuple[str, str, str]]:
    return []


@pytest.fixture
def failures() -> Dict[str, Exception]:
    return {}


@pytest.fixture
def operator_client(calls, failures) -> FakeIdentityClient:
    return FakeIdentityClient("operator", calls, failures=failures)


@pytest.fixture
def client_factory(calls, failures) -> FakeClientFactory:
    return FakeClientFactory(calls, failures)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep the developer's shell configuration out of the tests."""
    for name in (JUMPROLE_ACCOUNT_ID_ENV, "OSD_CLOUD_CONNECT_TIMEOUT", "OSD_CLOUD_READ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

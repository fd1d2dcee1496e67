"""Shared fixtures for the SDK test suite."""

from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

import pytest

from flopay_sdk.client import FlopayClient


class FakeResponse:
    """Minimal stand-in for an httpx Response."""

    def __init__(self, _json: Any, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self._json = _json
        self.text = text

    def json(self) -> Any:
        return self._json


@pytest.fixture
def http() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(http: MagicMock) -> FlopayClient:
    return FlopayClient("client-id-1", "client-secret-1", http_client=http)


@pytest.fixture
def authorized_client(client: FlopayClient, http: MagicMock) -> FlopayClient:
    http.post.return_value = FakeResponse(
        {"access_token": "test-token-123", "expires_in": 3600}
    )
    client.authorize()
    http.reset_mock()
    return client


@pytest.fixture
def transfer_params() -> dict[str, Any]:
    return {
        "senderAmount": Decimal("12.34"),
        "senderCurrency": "GHS",
        "recipientAmount": Decimal("12.34"),
        "recipientCurrency": "GHS",
        "recipientNo": "0551234567",
        "countryCode": "GH",
        "serviceCode": "cashin",
    }


@pytest.fixture
def no_flopay_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLOPAY_CLIENT_ID", raising=False)
    monkeypatch.delenv("FLOPAY_CLIENT_SECRET", raising=False)

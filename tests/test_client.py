"""Tests for TDMAClient factories and connection pooling."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from tdma_client import (
    AccountInfoGetter,
    Credentials,
    OrdersGetter,
    OrderStatusType,
    TDMAClient,
    TDMAConfig,
    TDMAValueError,
    TransactionType,
)

ACCOUNTS = "https://api.tdameritrade.com/v1/accounts/"


class TestFactories:
    """Tests for getter factory methods."""

    def test_account_info(self, credentials: Credentials) -> None:
        client = TDMAClient(credentials)

        getter = client.account_info("123", positions=True, orders=True)

        assert isinstance(getter, AccountInfoGetter)
        assert getter.credentials is credentials
        assert getter.url == f"{ACCOUNTS}123?fields=positions,orders"

    def test_uses_client_config(self, credentials: Credentials) -> None:
        config = TDMAConfig(base_url="http://localhost/v1")
        client = TDMAClient(credentials, config)

        assert client.preferences("123").url == "http://localhost/v1/accounts/123/preferences"

    def test_all_factories(self, credentials: Credentials) -> None:
        client = TDMAClient(credentials)

        assert client.streamer_subscription_keys("1").url.endswith(
            "streamersubscriptionkeys?accountIds=1"
        )
        assert client.transaction_history(
            "1", transaction_type=TransactionType.INTEREST, symbol="spy"
        ).url == f"{ACCOUNTS}1/transactions?type=INTEREST&symbol=SPY"
        assert client.individual_transaction_history("1", "2").url == (
            f"{ACCOUNTS}1/transactions/2"
        )
        assert client.order("1", "2").url == f"{ACCOUNTS}1/orders/2"
        assert client.user_principals(preferences=True).url.endswith("?fields=preferences")

    def test_orders(self, credentials: Credentials) -> None:
        client = TDMAClient(credentials)

        getter = client.orders(
            "1",
            nmax_results=5,
            from_entered_time="2021-01-01",
            to_entered_time="2021-01-02",
            order_status_type=OrderStatusType.WORKING,
        )

        assert isinstance(getter, OrdersGetter)
        assert getter.url == (
            f"{ACCOUNTS}1/orders?maxResults=5&fromEnteredTime=2021-01-01"
            "&toEnteredTime=2021-01-02&status=WORKING"
        )

    def test_factory_validation_errors_propagate(self, credentials: Credentials) -> None:
        client = TDMAClient(credentials)

        with pytest.raises(TDMAValueError):
            client.order("1", "")

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TDMA_ACCESS_TOKEN", "env_token")
        monkeypatch.setenv("TDMA_BASE_URL", "http://example.test/v1")
        monkeypatch.delenv("TDMA_TIMEOUT", raising=False)

        client = TDMAClient.from_env()

        assert client.credentials.access_token == "env_token"
        assert client.config.base_url == "http://example.test/v1"


class TestConnectionPooling:
    """Tests for shared http client lifecycle."""

    async def test_context_manager_creates_and_closes(self, credentials: Credentials) -> None:
        async with TDMAClient(credentials) as client:
            assert isinstance(client._http_client, httpx.AsyncClient)

        assert client._http_client is None

    async def test_getters_follow_pool_lifecycle(self, credentials: Credentials) -> None:
        """Getters created before open() pick up the pool, and drop it on close()."""
        client = TDMAClient(credentials)
        getter = client.order("1", "2")
        assert getter._http_client is None

        await client.open()
        assert getter._http_client is client._http_client
        assert client.order("1", "3")._http_client is client._http_client

        await client.close()
        assert getter._http_client is None

    async def test_external_client_not_closed(self, credentials: Credentials) -> None:
        external = httpx.AsyncClient()
        try:
            async with TDMAClient(credentials, http_client=external) as client:
                assert client.order("1", "2")._http_client is external

            assert not external.is_closed
        finally:
            await external.aclose()

    async def test_user_principals_for_streaming(self, credentials: Credentials) -> None:
        client = TDMAClient(credentials)

        with patch(
            "tdma_client.client.get_user_principals_for_streaming",
            new=AsyncMock(return_value={"userId": "x"}),
        ) as fetch:
            result = await client.user_principals_for_streaming()

        assert result == {"userId": "x"}
        fetch.assert_awaited_once_with(credentials, config=client.config, http_client=None)

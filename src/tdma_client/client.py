"""Main TD Ameritrade client."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from tdma_client.config import TDMAConfig
from tdma_client.getters import (
    AccountInfoGetter,
    APIGetter,
    IndividualTransactionHistoryGetter,
    OrderGetter,
    OrdersGetter,
    PreferencesGetter,
    StreamerSubscriptionKeysGetter,
    TransactionHistoryGetter,
    UserPrincipalsGetter,
    get_user_principals_for_streaming,
)
from tdma_client.models import Credentials
from tdma_client.types import OrderStatusType, TransactionType

if TYPE_CHECKING:
    from types import TracebackType

G = TypeVar("G", bound=APIGetter)


class TDMAClient:
    """Factory for getters sharing credentials, config and a connection pool.

    Usage (context manager - recommended for connection pooling):
        async with TDMAClient(credentials) as client:
            getter = client.account_info("123456789", positions=True)
            body = await getter.get()

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        client = TDMAClient(credentials, http_client=http_client)
        # Client uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        client = TDMAClient(credentials)
        body = await client.preferences("123456789").get()
    """

    def __init__(
        self,
        credentials: Credentials,
        config: TDMAConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or TDMAConfig()

        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._getters: weakref.WeakSet[APIGetter] = weakref.WeakSet()

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on every live getter."""
        self._http_client = http_client
        for getter in self._getters:
            getter.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests."""
        if self._http_client is None and self._owns_http_client:
            self._set_http_client(httpx.AsyncClient(timeout=self.config.timeout))

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> TDMAClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @classmethod
    def from_env(cls) -> TDMAClient:
        """Create client from environment variables.

        Expects TDMA_ACCESS_TOKEN; TDMA_BASE_URL and TDMA_TIMEOUT are optional.
        """
        return cls(Credentials.from_env(), TDMAConfig.from_env())

    def _register(self, getter: G) -> G:
        self._getters.add(getter)
        return getter

    def _options(self) -> dict[str, Any]:
        return {"config": self.config, "http_client": self._http_client}

    # Getter factories

    def account_info(
        self, account_id: str, *, positions: bool = False, orders: bool = False
    ) -> AccountInfoGetter:
        return self._register(
            AccountInfoGetter(self.credentials, account_id, positions, orders, **self._options())
        )

    def preferences(self, account_id: str) -> PreferencesGetter:
        return self._register(PreferencesGetter(self.credentials, account_id, **self._options()))

    def streamer_subscription_keys(self, account_id: str) -> StreamerSubscriptionKeysGetter:
        return self._register(
            StreamerSubscriptionKeysGetter(self.credentials, account_id, **self._options())
        )

    def transaction_history(
        self,
        account_id: str,
        *,
        transaction_type: TransactionType | str = TransactionType.ALL,
        symbol: str = "",
        start_date: str = "",
        end_date: str = "",
    ) -> TransactionHistoryGetter:
        return self._register(
            TransactionHistoryGetter(
                self.credentials,
                account_id,
                transaction_type,
                symbol,
                start_date,
                end_date,
                **self._options(),
            )
        )

    def individual_transaction_history(
        self, account_id: str, transaction_id: str
    ) -> IndividualTransactionHistoryGetter:
        return self._register(
            IndividualTransactionHistoryGetter(
                self.credentials, account_id, transaction_id, **self._options()
            )
        )

    def order(self, account_id: str, order_id: str) -> OrderGetter:
        return self._register(
            OrderGetter(self.credentials, account_id, order_id, **self._options())
        )

    def orders(
        self,
        account_id: str,
        *,
        nmax_results: int,
        from_entered_time: str,
        to_entered_time: str,
        order_status_type: OrderStatusType | str = OrderStatusType.ALL,
    ) -> OrdersGetter:
        return self._register(
            OrdersGetter(
                self.credentials,
                account_id,
                nmax_results,
                from_entered_time,
                to_entered_time,
                order_status_type,
                **self._options(),
            )
        )

    def user_principals(
        self,
        *,
        streamer_subscription_keys: bool = False,
        streamer_connection_info: bool = False,
        preferences: bool = False,
        surrogate_ids: bool = False,
    ) -> UserPrincipalsGetter:
        return self._register(
            UserPrincipalsGetter(
                self.credentials,
                streamer_subscription_keys,
                streamer_connection_info,
                preferences,
                surrogate_ids,
                **self._options(),
            )
        )

    async def user_principals_for_streaming(self) -> dict[str, Any] | list[Any]:
        """Fetch streaming subscription keys and connection info."""
        return await get_user_principals_for_streaming(
            self.credentials, config=self.config, http_client=self._http_client
        )

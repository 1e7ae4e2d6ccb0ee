"""Account information getters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tdma_client.getters.base import AccountGetterBase
from tdma_client.types import GetterKind
from tdma_client.util import require_bool, url_encode

if TYPE_CHECKING:
    import httpx

    from tdma_client.config import TDMAConfig
    from tdma_client.models import Credentials


class AccountInfoGetter(AccountGetterBase):
    """Account balances, optionally with positions and/or orders.

    Example:
        getter = AccountInfoGetter(creds, "123456789", positions=True)
        getter.url  # .../accounts/123456789?fields=positions
        getter.orders = True
        getter.url  # .../accounts/123456789?fields=positions,orders
    """

    kind = GetterKind.ACCOUNT_INFO

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        positions: bool = False,
        orders: bool = False,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._positions = require_bool(positions, "positions")
        self._orders = require_bool(orders, "orders")
        self._refresh()

    @property
    def positions(self) -> bool:
        """Whether positions are returned."""
        return self._read("_positions")

    @positions.setter
    def positions(self, value: bool) -> None:
        self._assign("positions", value, require_bool)

    @property
    def orders(self) -> bool:
        """Whether orders are returned."""
        return self._read("_orders")

    @orders.setter
    def orders(self, value: bool) -> None:
        self._assign("orders", value, require_bool)

    def rebuild(self) -> str:
        fields = [
            name
            for name, enabled in (("positions", self._positions), ("orders", self._orders))
            if enabled
        ]
        query = f"?fields={','.join(fields)}" if fields else ""
        return self._account_url(query)


class PreferencesGetter(AccountGetterBase):
    """Account preferences."""

    kind = GetterKind.PREFERENCES

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._refresh()

    def rebuild(self) -> str:
        return self._account_url("/preferences")


class StreamerSubscriptionKeysGetter(AccountGetterBase):
    """Streamer subscription keys for an account.

    Account-scoped, but lives under ``userprincipals/`` rather than
    ``accounts/``.
    """

    kind = GetterKind.SUBSCRIPTION_KEYS

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._refresh()

    def rebuild(self) -> str:
        return (
            f"{self.config.api_base_url}userprincipals/streamersubscriptionkeys"
            f"?accountIds={url_encode(self._account_id)}"
        )

"""Order getters."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from tdma_client.getters.base import AccountGetterBase
from tdma_client.types import GetterKind, OrderStatusType
from tdma_client.util import (
    build_encoded_query_str,
    require_enum,
    require_iso8601_datetime,
    require_non_empty,
    require_positive_int,
    url_encode,
)

if TYPE_CHECKING:
    import httpx

    from tdma_client.config import TDMAConfig
    from tdma_client.models import Credentials

_require_order_status = partial(require_enum, OrderStatusType)


class OrderGetter(AccountGetterBase):
    """A single order by id."""

    kind = GetterKind.ORDER

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        order_id: str,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._order_id = require_non_empty(order_id, "order_id")
        self._refresh()

    @property
    def order_id(self) -> str:
        """Order requested."""
        return self._read("_order_id")

    @order_id.setter
    def order_id(self, value: str) -> None:
        self._assign("order_id", value, require_non_empty)

    def rebuild(self) -> str:
        return self._account_url(f"/orders/{url_encode(self._order_id)}")


class OrdersGetter(AccountGetterBase):
    """Orders entered within a time window, filtered by status.

    Unlike transaction history, both ends of the window are required and
    every query parameter is always sent.

    Example:
        getter = OrdersGetter(
            creds,
            "123456789",
            nmax_results=10,
            from_entered_time="2021-01-01T00:00:00Z",
            to_entered_time="2021-02-01T00:00:00Z",
            order_status_type=OrderStatusType.FILLED,
        )
    """

    kind = GetterKind.ORDERS

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        nmax_results: int,
        from_entered_time: str,
        to_entered_time: str,
        order_status_type: OrderStatusType | str = OrderStatusType.ALL,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._nmax_results = require_positive_int(nmax_results, "nmax_results")
        self._from_entered_time = require_iso8601_datetime(from_entered_time, "from_entered_time")
        self._to_entered_time = require_iso8601_datetime(to_entered_time, "to_entered_time")
        self._order_status_type = _require_order_status(order_status_type, "order_status_type")
        self._refresh()

    @property
    def nmax_results(self) -> int:
        """Maximum number of orders returned."""
        return self._read("_nmax_results")

    @nmax_results.setter
    def nmax_results(self, value: int) -> None:
        self._assign("nmax_results", value, require_positive_int)

    @property
    def from_entered_time(self) -> str:
        """Start of the entered-time window."""
        return self._read("_from_entered_time")

    @from_entered_time.setter
    def from_entered_time(self, value: str) -> None:
        self._assign("from_entered_time", value, require_iso8601_datetime)

    @property
    def to_entered_time(self) -> str:
        """End of the entered-time window."""
        return self._read("_to_entered_time")

    @to_entered_time.setter
    def to_entered_time(self, value: str) -> None:
        self._assign("to_entered_time", value, require_iso8601_datetime)

    @property
    def order_status_type(self) -> OrderStatusType:
        """Status of orders returned."""
        return self._read("_order_status_type")

    @order_status_type.setter
    def order_status_type(self, value: OrderStatusType | str) -> None:
        self._assign("order_status_type", value, _require_order_status)

    def rebuild(self) -> str:
        params = [
            ("maxResults", str(self._nmax_results)),
            ("fromEnteredTime", self._from_entered_time),
            ("toEnteredTime", self._to_entered_time),
            ("status", str(self._order_status_type)),
        ]
        return self._account_url(f"/orders?{build_encoded_query_str(params)}")

"""Transaction history getters."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from tdma_client.exceptions import TDMAValueError
from tdma_client.getters.base import AccountGetterBase
from tdma_client.types import GetterKind, TransactionType
from tdma_client.util import (
    build_encoded_query_str,
    require_enum,
    require_iso8601_datetime,
    require_non_empty,
    url_encode,
)

if TYPE_CHECKING:
    import httpx

    from tdma_client.config import TDMAConfig
    from tdma_client.models import Credentials

_require_transaction_type = partial(require_enum, TransactionType)
_require_optional_date = partial(require_iso8601_datetime, optional=True)


def _require_symbol(value: str, field: str) -> str:
    if not isinstance(value, str):
        raise TDMAValueError(f"{field} must be a str, got {value!r}", field=field, value=value)
    return value.upper()


class TransactionHistoryGetter(AccountGetterBase):
    """Transactions for an account, filtered by type, symbol and date range.

    ``symbol``, ``start_date`` and ``end_date`` are optional; an empty string
    leaves them out of the query. Dates are ISO-8601 dates or date/times.
    """

    kind = GetterKind.TRANSACTION_HISTORY

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        transaction_type: TransactionType | str = TransactionType.ALL,
        symbol: str = "",
        start_date: str = "",
        end_date: str = "",
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._transaction_type = _require_transaction_type(transaction_type, "transaction_type")
        self._symbol = _require_symbol(symbol, "symbol")
        self._start_date = _require_optional_date(start_date, "start_date")
        self._end_date = _require_optional_date(end_date, "end_date")
        self._refresh()

    @property
    def transaction_type(self) -> TransactionType:
        """Type of transactions returned."""
        return self._read("_transaction_type")

    @transaction_type.setter
    def transaction_type(self, value: TransactionType | str) -> None:
        self._assign("transaction_type", value, _require_transaction_type)

    @property
    def symbol(self) -> str:
        """Symbol filter, stored upper-case ("" for none)."""
        return self._read("_symbol")

    @symbol.setter
    def symbol(self, value: str) -> None:
        self._assign("symbol", value, _require_symbol)

    @property
    def start_date(self) -> str:
        """Earliest transaction date ("" for none)."""
        return self._read("_start_date")

    @start_date.setter
    def start_date(self, value: str) -> None:
        self._assign("start_date", value, _require_optional_date)

    @property
    def end_date(self) -> str:
        """Latest transaction date ("" for none)."""
        return self._read("_end_date")

    @end_date.setter
    def end_date(self, value: str) -> None:
        self._assign("end_date", value, _require_optional_date)

    def rebuild(self) -> str:
        params = [("type", str(self._transaction_type))]
        if self._symbol:
            params.append(("symbol", self._symbol))
        if self._start_date:
            params.append(("startDate", self._start_date))
        if self._end_date:
            params.append(("endDate", self._end_date))

        return self._account_url(f"/transactions?{build_encoded_query_str(params)}")


class IndividualTransactionHistoryGetter(AccountGetterBase):
    """A single transaction by id."""

    kind = GetterKind.INDIVIDUAL_TRANSACTION_HISTORY

    def __init__(
        self,
        credentials: Credentials,
        account_id: str,
        transaction_id: str,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, account_id, config=config, http_client=http_client)
        self._transaction_id = require_non_empty(transaction_id, "transaction_id")
        self._refresh()

    @property
    def transaction_id(self) -> str:
        """Transaction requested."""
        return self._read("_transaction_id")

    @transaction_id.setter
    def transaction_id(self, value: str) -> None:
        self._assign("transaction_id", value, require_non_empty)

    def rebuild(self) -> str:
        return self._account_url(f"/transactions/{url_encode(self._transaction_id)}")

"""TD Ameritrade account API client library.

Typed getters that build authenticated request URLs for account info,
preferences, transactions, orders and user principals.

Example:
    from tdma_client import Credentials, TDMAClient, TransactionType

    credentials = Credentials(access_token="...")

    async with TDMAClient(credentials) as client:
        getter = client.transaction_history(
            "123456789",
            transaction_type=TransactionType.TRADE,
            symbol="aapl",
            start_date="2021-01-01",
        )
        print(getter.url)
        body = await getter.get()

        # Getters are mutable; the URL follows every change
        getter.symbol = "msft"
        body = await getter.get()

        principals = await client.user_principals_for_streaming()
"""

from tdma_client.client import TDMAClient
from tdma_client.config import TDMAConfig
from tdma_client.exceptions import (
    TDMAAPIError,
    TDMAAuthError,
    TDMAError,
    TDMAHandleError,
    TDMAValueError,
)
from tdma_client.getters import (
    AccountGetterBase,
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
from tdma_client.types import GetterKind, OrderStatusType, TransactionType

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Credentials",
    "TDMAClient",
    "TDMAConfig",
    # Getters
    "APIGetter",
    "AccountGetterBase",
    "AccountInfoGetter",
    "IndividualTransactionHistoryGetter",
    "OrderGetter",
    "OrdersGetter",
    "PreferencesGetter",
    "StreamerSubscriptionKeysGetter",
    "TransactionHistoryGetter",
    "UserPrincipalsGetter",
    "get_user_principals_for_streaming",
    # Enums
    "GetterKind",
    "OrderStatusType",
    "TransactionType",
    # Exceptions
    "TDMAAPIError",
    "TDMAAuthError",
    "TDMAError",
    "TDMAHandleError",
    "TDMAValueError",
]

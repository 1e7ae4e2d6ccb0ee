"""TD Ameritrade request getters."""

from tdma_client.getters.accounts import (
    AccountInfoGetter,
    PreferencesGetter,
    StreamerSubscriptionKeysGetter,
)
from tdma_client.getters.base import AccountGetterBase, APIGetter
from tdma_client.getters.orders import OrderGetter, OrdersGetter
from tdma_client.getters.transactions import (
    IndividualTransactionHistoryGetter,
    TransactionHistoryGetter,
)
from tdma_client.getters.user_principals import (
    UserPrincipalsGetter,
    get_user_principals_for_streaming,
)

__all__ = [
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
]

"""Enumerations shared by the getters.

The string value of each member is exactly what the API expects in a
query string.
"""

from enum import StrEnum


class GetterKind(StrEnum):
    """Tag identifying the endpoint a getter targets."""

    ACCOUNT_INFO = "account_info"
    PREFERENCES = "preferences"
    SUBSCRIPTION_KEYS = "subscription_keys"
    TRANSACTION_HISTORY = "transaction_history"
    INDIVIDUAL_TRANSACTION_HISTORY = "individual_transaction_history"
    USER_PRINCIPALS = "user_principals"
    ORDER = "order"
    ORDERS = "orders"


class TransactionType(StrEnum):
    """Transaction history filter values."""

    ALL = "ALL"
    TRADE = "TRADE"
    BUY_ONLY = "BUY_ONLY"
    SELL_ONLY = "SELL_ONLY"
    CASH_IN_OR_CASH_OUT = "CASH_IN_OR_CASH_OUT"
    CHECKING = "CHECKING"
    DIVIDEND = "DIVIDEND"
    INTEREST = "INTEREST"
    OTHER = "OTHER"
    ADVISOR_FEES = "ADVISOR_FEES"


class OrderStatusType(StrEnum):
    """Order status filter values."""

    AWAITING_PARENT_ORDER = "AWAITING_PARENT_ORDER"
    AWAITING_CONDITION = "AWAITING_CONDITION"
    AWAITING_MANUAL_REVIEW = "AWAITING_MANUAL_REVIEW"
    ACCEPTED = "ACCEPTED"
    AWAITING_UR_OUT = "AWAITING_UR_OUT"
    PENDING_ACTIVATION = "PENDING_ACTIVATION"
    QUEUED = "QUEUED"
    WORKING = "WORKING"
    REJECTED = "REJECTED"
    PENDING_CANCEL = "PENDING_CANCEL"
    CANCELED = "CANCELED"
    PENDING_REPLACE = "PENDING_REPLACE"
    REPLACED = "REPLACED"
    FILLED = "FILLED"
    EXPIRED = "EXPIRED"
    ALL = "ALL"
